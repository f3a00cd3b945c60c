"""IPFS paths plus IPNS publish and resolve calls against a Kubo RPC API."""

from __future__ import annotations

import enum
import json
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

import httpx

from kuborpc.cid import CidError
from kuborpc.ipfs import IpfsCid
from kuborpc.keys import IpnsKey


class Namespace(enum.Enum):
    """The namespace at the start of an IPFS path."""

    IPFS = "ipfs"
    IPNS = "ipns"


_TARGET_TYPES = {Namespace.IPFS: IpfsCid, Namespace.IPNS: IpnsKey}


@dataclass(frozen=True)
class IpfsPath:
    """Either ``/ipfs/<cid>`` or ``/ipns/<key>``."""

    namespace: Namespace
    target: Union[IpfsCid, IpnsKey]

    def __post_init__(self) -> None:
        expected = _TARGET_TYPES[self.namespace]
        if not isinstance(self.target, expected):
            raise TypeError(
                f"/{self.namespace.value}/ paths need a {expected.__name__} target"
            )

    @classmethod
    def parse(cls, text: str) -> IpfsPath:
        """Parse ``/ipfs/<cid>`` or ``/ipns/<key>``."""
        if text.startswith("/ipfs/"):
            rest = text[len("/ipfs/"):]
            try:
                return cls(Namespace.IPFS, IpfsCid.parse(rest))
            except CidError:
                raise ValueError("Invalid CID in /ipfs/ path") from None
        if text.startswith("/ipns/"):
            rest = text[len("/ipns/"):]
            try:
                return cls(Namespace.IPNS, IpnsKey.parse(rest))
            except CidError:
                raise ValueError(f"Invalid IPNS key in /ipns/ path: {rest}") from None
        raise ValueError("IPFS path must start with /ipfs/ or /ipns/")

    def as_str(self) -> str:
        return f"/{self.namespace.value}/{self.target}"

    def __str__(self) -> str:
        return self.as_str()


@dataclass(frozen=True)
class PublishResponse:
    """The daemon's answer to a name/publish call."""

    name: str
    value: IpfsPath

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PublishResponse:
        """Build a response from the decoded JSON object."""
        if not isinstance(data, Mapping):
            raise ValueError("publish response must be a JSON object")
        name = data.get("Name")
        value = data.get("Value")
        if not isinstance(name, str):
            raise ValueError("publish response is missing field 'Name'")
        if not isinstance(value, str):
            raise ValueError("publish response is missing field 'Value'")
        return cls(name=name, value=IpfsPath.parse(value))


async def name_publish(
    base_url: str,
    ipfs_path: IpfsPath,
    key: IpnsKey,
    lifetime: str | None = None,
    ttl: str | None = None,
) -> PublishResponse:
    """Publish ``ipfs_path`` under the IPNS ``key``."""
    params = [("arg", ipfs_path.as_str()), ("key", str(key))]
    if lifetime is not None:
        params.append(("lifetime", lifetime))
    if ttl is not None:
        params.append(("ttl", ttl))

    async with httpx.AsyncClient(timeout=None) as client:
        response = await client.post(
            f"{base_url}/api/v0/name/publish", params=params
        )
        payload = response.json()
    return PublishResponse.from_json(payload)


async def name_resolve_streaming(
    base_url: str,
    name: IpnsKey,
    stream: bool = False,
    recursive: bool | None = None,
    nocache: bool | None = None,
    dht_record_count: int | None = None,
    dht_timeout: str | None = None,
) -> AsyncIterator[IpfsPath]:
    """Resolve ``name``, yielding each resolved path as its line arrives."""
    params = [("arg", str(name))]
    if stream:
        params.append(("stream", "true"))
    if recursive is not None:
        params.append(("recursive", "true" if recursive else "false"))
    if nocache is not None:
        params.append(("nocache", "true" if nocache else "false"))
    if dht_record_count is not None:
        params.append(("dht-record-count", str(dht_record_count)))
    if dht_timeout is not None:
        params.append(("dht-timeout", dht_timeout))

    async with httpx.AsyncClient(timeout=None) as client:
        async with client.stream(
            "POST", f"{base_url}/api/v0/name/resolve", params=params
        ) as response:
            async for line in response.aiter_lines():
                if not line.strip():
                    continue
                item = json.loads(line)
                if not isinstance(item, dict) or not isinstance(item.get("Path"), str):
                    raise ValueError("resolve response is missing field 'Path'")
                yield IpfsPath.parse(item["Path"])