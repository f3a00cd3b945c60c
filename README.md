# kuborpc

An asyncio client for the RPC API of a Kubo IPFS daemon, built on `httpx`.

- `kuborpc.cid`: a small, self-contained CID implementation (`Cid`,
  `CidError`).
- `kuborpc.ipfs`: `IpfsCid` for IPFS content, and the raw block calls
  `put_block` and `get_block`.
- `kuborpc.keys`: `IpnsKey` for IPNS names, and `generate_ipns_key`.
- `kuborpc.ipns`: `IpfsPath` (`/ipfs/...` or `/ipns/...`), `name_publish`
  and `name_resolve_streaming`.

## Installation

```
pip install kuborpc
```

The network calls need a running daemon with its API reachable, usually at
`http://127.0.0.1:5001`.

## Content identifiers

`Cid` is a frozen dataclass with `version` (0 or 1), `codec`, `hash_code`
and `digest`.

- `Cid.parse(text)` accepts a bare base58 CIDv0 (`Qm...`) or a multibase
  string with one of the prefixes `z` (base58btc), `k`/`K` (base36),
  `b`/`B` (base32), `f`/`F` (base16), `m` (base64) or `u` (base64url).
- `Cid.from_bytes(data)` and `cid.to_bytes()` convert to and from the binary
  form; `cid.multihash` gives the multihash bytes.
- `cid.to_base58btc()` gives bare base58 for v0 and `z`-prefixed base58 for
  v1; `cid.to_base36lower()` gives `k`-prefixed base36 and refuses v0;
  `str(cid)` gives base58 for v0 and `b`-prefixed base32 for v1.

Every failure raises `CidError`, a subclass of `ValueError`.

The typed wrappers check the codec:

```python
from kuborpc.ipfs import IpfsCid
from kuborpc.keys import IpnsKey
from kuborpc.ipns import IpfsPath

cid = IpfsCid.parse("QmdbWa3wBGwQ4suXjEpPkrigP3UmBMECdJNmkHfz6btqaJ")
str(cid)   # base58btc text

key = IpnsKey.parse("k51qzi5uqu5dgndmfpeorlwuar7u66p9g9l0dolwy2v7sm6dt5sorjityev4ib")
str(key)   # base36 lower text

path = IpfsPath.parse("/ipns/k51qzi5uqu5dgndmfpeorlwuar7u66p9g9l0dolwy2v7sm6dt5sorjityev4ib")
path.namespace   # Namespace.IPNS
path.as_str()    # same as str(path)
```

- `IpfsCid` accepts only the dag-pb (`0x70`) and raw (`0x55`) codecs;
  `IpnsKey` accepts only libp2p-key (`0x72`). Both have `parse(text)` and
  `from_cid(cid)`, and raise `CidError` for bad text or the wrong codec.
- `IpfsPath.parse` raises `ValueError` unless the text begins with `/ipfs/`
  followed by an IPFS CID, or `/ipns/` followed by an IPNS key.

## Talking to the daemon

```python
import asyncio

from kuborpc.ipfs import get_block, put_block
from kuborpc.ipns import IpfsPath, name_publish, name_resolve_streaming
from kuborpc.keys import generate_ipns_key

API = "http://127.0.0.1:5001"

async def demo():
    cid = await put_block(API, b"hello")
    assert await get_block(API, cid) == b"hello"

    key = await generate_ipns_key(API, "my-key")
    published = await name_publish(API, IpfsPath.parse(f"/ipfs/{cid}"), key, "24h", None)
    print(published.name, published.value)

    async for resolved in name_resolve_streaming(API, key, False, None, None, None, None):
        print(resolved)

asyncio.run(demo())
```

- `put_block(base_url, data)` uploads `data` as a multipart file and returns
  the `IpfsCid` from the `Key` field of the reply.
- `get_block(base_url, cid)` returns the response body as bytes, with a
  10-second read timeout. It does not check the HTTP status, so a daemon
  error comes back as the body of the error reply.
- `name_publish(base_url, ipfs_path, key, lifetime, ttl)` returns a
  `PublishResponse` with `name` and `value` (an `IpfsPath`); `lifetime` and
  `ttl` are sent only when not `None`.
- `name_resolve_streaming(base_url, name, stream, recursive, nocache,
  dht_record_count, dht_timeout)` is an async generator yielding an
  `IpfsPath` for each JSON line the daemon sends; options left as `None`
  are not sent.
- `generate_ipns_key(base_url, name)` returns the new `IpnsKey`, and raises
  `KeyGenerationError` with the daemon's message when the reply is not
  200 OK, for example because the name is already taken.

## What it does not do

There is no command-line tool. Only the calls listed above are wrapped:
there is no adding or reading of files, pinning, or listing and removing of
keys.

## Running the tests

```
pip install -e ".[test]"
pytest
```

The tests mock the HTTP API and need no daemon.