"""IPFS content identifiers and block get/put calls against a Kubo RPC API."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from kuborpc.cid import Cid, CidError

DAG_PB_CODEC = 0x70
RAW_CODEC = 0x55
_SUPPORTED_CODECS = (DAG_PB_CODEC, RAW_CODEC)


@dataclass(frozen=True)
class IpfsCid:
    """A CID whose codec is dag-pb or raw."""

    cid: Cid

    def __post_init__(self) -> None:
        if self.cid.codec not in _SUPPORTED_CODECS:
            raise CidError("Unsupported codec for IPFS CID")

    @classmethod
    def from_cid(cls, cid: Cid) -> IpfsCid:
        return cls(cid)

    @classmethod
    def parse(cls, text: str) -> IpfsCid:
        try:
            cid = Cid.parse(text)
        except CidError:
            raise CidError("Invalid CID") from None
        return cls.from_cid(cid)

    def __str__(self) -> str:
        return self.cid.to_base58btc()


async def get_block(base_url: str, cid: IpfsCid) -> bytes:
    """Fetch the raw bytes of a block from the daemon at ``base_url``."""
    timeout = httpx.Timeout(None, read=10.0)
    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.post(
            f"{base_url}/api/v0/block/get", params={"arg": str(cid)}
        )
        return response.content


async def put_block(base_url: str, data: bytes) -> IpfsCid:
    """Store ``data`` as a block and return its CID."""
    async with httpx.AsyncClient(timeout=None) as client:
        response = await client.post(
            f"{base_url}/api/v0/block/put",
            files={"data": ("block.data", bytes(data))},
        )
        payload = response.json()
    if not isinstance(payload, dict) or not isinstance(payload.get("Key"), str):
        raise ValueError("malformed block/put response: missing Key")
    return IpfsCid.parse(payload["Key"])