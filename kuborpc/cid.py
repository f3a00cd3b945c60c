"""Content identifiers: parsing, binary layout and multibase text forms."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

DAG_PB_CODEC = 0x70
SHA2_256_CODE = 0x12
SHA2_256_SIZE = 32
MAX_DIGEST_SIZE = 64
_MAX_VARINT_BYTES = 9

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class CidError(ValueError):
    """Raised when a CID cannot be parsed, encoded or converted."""


def _encode_basex(data: bytes, alphabet: str) -> str:
    base = len(alphabet)
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])
    zeros = len(data) - len(data.lstrip(b"\0"))
    return alphabet[0] * zeros + "".join(reversed(digits))


def _decode_basex(text: str, alphabet: str) -> bytes:
    base = len(alphabet)
    leading = len(text) - len(text.lstrip(alphabet[0]))
    number = 0
    for char in text:
        index = alphabet.find(char)
        if index < 0:
            raise CidError(f"invalid character {char!r} for base{base}")
        number = number * base + index
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading + body


def _decode_rfc4648(text: str, decoder) -> bytes:
    padded = text + "=" * (-len(text) % (8 if decoder is base64.b32decode else 4))
    try:
        return decoder(padded)
    except (binascii.Error, ValueError) as exc:
        raise CidError(f"invalid multibase payload: {exc}") from None


def _decode_multibase(text: str) -> bytes:
    if not text:
        raise CidError("empty multibase string")
    prefix, payload = text[0], text[1:]
    if prefix == "z":
        return _decode_basex(payload, _BASE58_ALPHABET)
    if prefix == "k":
        return _decode_basex(payload, _BASE36_ALPHABET)
    if prefix == "K":
        if payload != payload.upper():
            raise CidError("invalid character for base36upper")
        return _decode_basex(payload.lower(), _BASE36_ALPHABET)
    if prefix == "b":
        if payload != payload.lower():
            raise CidError("invalid character for base32lower")
        return _decode_rfc4648(payload.upper(), base64.b32decode)
    if prefix == "B":
        if payload != payload.upper():
            raise CidError("invalid character for base32upper")
        return _decode_rfc4648(payload, base64.b32decode)
    if prefix in ("f", "F"):
        expected = payload.lower() if prefix == "f" else payload.upper()
        if payload != expected:
            raise CidError("invalid character for base16")
        try:
            return bytes.fromhex(payload)
        except ValueError:
            raise CidError("invalid base16 payload") from None
    if prefix == "m":
        return _decode_rfc4648(payload, base64.b64decode)
    if prefix == "u":
        return _decode_rfc4648(payload, base64.urlsafe_b64decode)
    raise CidError(f"unknown multibase prefix {prefix!r}")


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    value = 0
    for shift_index, byte in enumerate(data[pos:pos + _MAX_VARINT_BYTES]):
        value |= (byte & 0x7F) << (7 * shift_index)
        if not byte & 0x80:
            return value, pos + shift_index + 1
    raise CidError("truncated or overlong varint")


@dataclass(frozen=True)
class Cid:
    """A version 0 or version 1 content identifier."""

    version: int
    codec: int
    hash_code: int
    digest: bytes

    def __post_init__(self) -> None:
        if self.version not in (0, 1):
            raise CidError(f"unsupported CID version {self.version}")
        if len(self.digest) > MAX_DIGEST_SIZE:
            raise CidError("multihash digest too large")
        if self.version == 0 and (
            self.codec != DAG_PB_CODEC
            or self.hash_code != SHA2_256_CODE
            or len(self.digest) != SHA2_256_SIZE
        ):
            raise CidError("CIDv0 must be a dag-pb sha2-256 multihash")

    @classmethod
    def parse(cls, text: str) -> Cid:
        """Parse a CID from its textual form (bare base58 v0 or multibase)."""
        if len(text) == 46 and text.startswith("Qm"):
            data = _decode_basex(text, _BASE58_ALPHABET)
        else:
            data = _decode_multibase(text)
        return cls.from_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> Cid:
        """Decode a CID from its binary form."""
        first, pos = _read_varint(data, 0)
        if first == SHA2_256_CODE:
            version, codec, pos = 0, DAG_PB_CODEC, 0
        elif first == 1:
            version = 1
            codec, pos = _read_varint(data, pos)
        else:
            raise CidError(f"unsupported CID version {first}")
        hash_code, pos = _read_varint(data, pos)
        size, pos = _read_varint(data, pos)
        digest = data[pos:pos + size]
        if len(digest) != size:
            raise CidError("truncated multihash digest")
        if pos + size != len(data):
            raise CidError("trailing bytes after CID")
        return cls(version, codec, hash_code, bytes(digest))

    @property
    def multihash(self) -> bytes:
        return (
            _encode_varint(self.hash_code)
            + _encode_varint(len(self.digest))
            + self.digest
        )

    def to_bytes(self) -> bytes:
        """Return the binary form of the CID."""
        if self.version == 0:
            return self.multihash
        return _encode_varint(1) + _encode_varint(self.codec) + self.multihash

    def to_base58btc(self) -> str:
        """Bare base58 for v0, 'z'-prefixed multibase for v1."""
        encoded = _encode_basex(self.to_bytes(), _BASE58_ALPHABET)
        return encoded if self.version == 0 else "z" + encoded

    def to_base36lower(self) -> str:
        """'k'-prefixed base36 multibase; not available for v0."""
        if self.version == 0:
            raise CidError("CIDv0 can only be encoded as base58btc")
        return "k" + _encode_basex(self.to_bytes(), _BASE36_ALPHABET)

    def __str__(self) -> str:
        if self.version == 0:
            return self.to_base58btc()
        return "b" + base64.b32encode(self.to_bytes()).decode("ascii").lower().rstrip("=")