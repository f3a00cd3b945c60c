"""IPNS keys and key generation against a Kubo RPC API."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from kuborpc.cid import Cid, CidError

LIBP2P_KEY_CODE = 0x72


class KeyGenerationError(RuntimeError):
    """Raised when the daemon refuses to generate a key."""


@dataclass(frozen=True)
class IpnsKey:
    """A CID with the libp2p-key codec."""

    cid: Cid

    def __post_init__(self) -> None:
        if self.cid.codec != LIBP2P_KEY_CODE:
            raise CidError("Not an IPNS key")

    @classmethod
    def from_cid(cls, cid: Cid) -> IpnsKey:
        return cls(cid)

    @classmethod
    def parse(cls, text: str) -> IpnsKey:
        try:
            cid = Cid.parse(text)
        except CidError:
            raise CidError("Invalid CID") from None
        return cls.from_cid(cid)

    def __str__(self) -> str:
        return self.cid.to_base36lower()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return "Unknown error"
    if isinstance(body, dict) and isinstance(body.get("Message"), str):
        return body["Message"]
    return "Unknown error"


async def generate_ipns_key(base_url: str, name: str) -> IpnsKey:
    """Generate a new key called ``name`` and return its IPNS identifier."""
    async with httpx.AsyncClient(timeout=None) as client:
        response = await client.post(
            f"{base_url}/api/v0/key/gen", params={"arg": name}
        )
    if response.status_code != httpx.codes.OK:
        raise KeyGenerationError(
            f"IPFS key generation failed: {_error_message(response)}"
        )
    info = response.json()
    if not isinstance(info, dict) or not isinstance(info.get("Id"), str):
        raise ValueError("Failed to deserialize key generation response")
    return IpnsKey.parse(info["Id"])