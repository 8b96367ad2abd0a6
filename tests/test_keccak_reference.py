"""
The reference wrappers must agree with hashlib and with the pure-Python digests.
"""
import hashlib

import pytest

from keccak_reference import KeccakReference, SHA3, reference, reference_digest, verify


@pytest.mark.parametrize("bits", [224, 256, 384, 512])
def test_cryptography_sha3_matches_hashlib(bits):
    msg = b"hello world"
    assert reference_digest("sha3", bits, msg) == hashlib.new(f"sha3_{bits}", msg).digest()


def test_pycryptodome_keccak_empty():
    assert reference_digest("keccak", 256, b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470")


@pytest.mark.parametrize("family", ["keccak", "sha3"])
@pytest.mark.parametrize("bits", [224, 256, 384, 512])
def test_verify(family, bits, message):
    assert verify(family, bits, message.encode("utf-8"))


def test_streaming_reference():
    ref = reference("keccak", 512)
    assert isinstance(ref, KeccakReference)
    ref.update(b"hello ")
    ref.update(b"world")
    assert ref.finalize() == reference_digest("keccak", 512, b"hello world")
    assert isinstance(reference("sha3", 224), SHA3)


def test_unknown_reference_rejected():
    with pytest.raises(ValueError):
        reference("shake", 256)
    with pytest.raises(ValueError):
        reference_digest("keccak", 100, b"")
