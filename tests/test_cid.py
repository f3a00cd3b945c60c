import base64

import pytest

from kuborpc.cid import Cid, CidError

QM_CIDS = [
    "QmdbWa3wBGwQ4suXjEpPkrigP3UmBMECdJNmkHfz6btqaJ",
    "QmbFMke1KXqnYyBBWxB74N4c5SBnJMVAiMNRcGu6x1AwQH",
]
K_KEYS = [
    "k51qzi5uqu5dgndmfpeorlwuar7u66p9g9l0dolwy2v7sm6dt5sorjityev4ib",
    "k51qzi5uqu5diyjoiyz6khv249l3puwbir19wiw1e3lehe4uw6g28pmtslcgqn",
]


@pytest.mark.parametrize("text", QM_CIDS)
def test_v0_round_trip(text):
    cid = Cid.parse(text)
    assert cid.version == 0
    assert cid.codec == 0x70
    assert cid.hash_code == 0x12
    assert len(cid.digest) == 32
    assert cid.to_base58btc() == text


@pytest.mark.parametrize("text", K_KEYS)
def test_v1_base36_round_trip(text):
    cid = Cid.parse(text)
    assert cid.version == 1
    assert cid.codec == 0x72
    assert cid.to_base36lower() == text


@pytest.mark.parametrize("text", QM_CIDS + K_KEYS)
def test_bytes_round_trip(text):
    cid = Cid.parse(text)
    assert Cid.from_bytes(cid.to_bytes()) == cid


def test_v0_bytes_are_multihash():
    cid = Cid.parse(QM_CIDS[0])
    data = cid.to_bytes()
    assert data[:2] == bytes([0x12, 0x20])
    assert len(data) == 34


def test_v0_has_no_base36_form():
    with pytest.raises(CidError):
        Cid.parse(QM_CIDS[0]).to_base36lower()


def test_v1_base58_is_z_prefixed_and_parses_back():
    cid = Cid.from_bytes(bytes([1, 0x55, 0x12, 0x20]) + bytes(range(32)))
    text = cid.to_base58btc()
    assert text.startswith("z")
    assert Cid.parse(text) == cid


def test_base32_multibase_parses():
    raw = bytes([1, 0x55, 0x12, 0x20]) + bytes(range(32))
    text = "b" + base64.b32encode(raw).decode().lower().rstrip("=")
    cid = Cid.parse(text)
    assert cid.codec == 0x55
    assert cid.to_bytes() == raw
    assert str(cid) == text


def test_base36_and_base58_of_same_cid_agree():
    cid = Cid.parse(K_KEYS[0])
    assert Cid.parse(cid.to_base58btc()) == cid


@pytest.mark.parametrize("text", ["not-a-cid", "", "Qm", "zzzz0OIl"])
def test_invalid_strings(text):
    with pytest.raises(CidError):
        Cid.parse(text)


def test_truncated_digest_rejected():
    with pytest.raises(CidError):
        Cid.from_bytes(bytes([1, 0x55, 0x12, 0x20]) + bytes(10))


def test_trailing_bytes_rejected():
    with pytest.raises(CidError):
        Cid.from_bytes(bytes([1, 0x55, 0x12, 0x02, 0xAA, 0xBB, 0xCC]))


def test_unknown_version_rejected():
    with pytest.raises(CidError):
        Cid.from_bytes(bytes([2, 0x55, 0x12, 0x01, 0xAA]))


def test_oversized_digest_rejected():
    with pytest.raises(CidError):
        Cid.from_bytes(bytes([1, 0x55, 0x13, 65]) + bytes(65))


def test_v0_requires_sha256():
    with pytest.raises(CidError):
        Cid(0, 0x70, 0x13, bytes(32))