"""
Reference digests from established libraries, for cross-checking.

SHA-3 comes from cryptography, the original (pre-FIPS) Keccak padding from
pycryptodome's Crypto.Hash.keccak since cryptography doesn't expose it.
"""
from Crypto.Hash import keccak as _pycryptodome_keccak
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from keccak import PARAMETERS, new


_SHA3 = {
    224: hashes.SHA3_224,
    256: hashes.SHA3_256,
    384: hashes.SHA3_384,
    512: hashes.SHA3_512,
}


# SHA-3 wrapper using cryptography
class SHA3:
    def __init__(self, bits: int):
        self.backend = default_backend()
        self.digest = hashes.Hash(_SHA3[bits](), backend=self.backend)

    def update(self, data: bytes):
        self.digest.update(data)

    def finalize(self) -> bytes:
        return self.digest.finalize()


# Keccak wrapper using pycryptodome
class KeccakReference:
    def __init__(self, bits: int):
        self.digest = _pycryptodome_keccak.new(digest_bits=bits)

    def update(self, data: bytes):
        self.digest.update(data)

    def finalize(self) -> bytes:
        return self.digest.digest()


_REFERENCES = {
    "keccak": KeccakReference,
    "sha3": SHA3,
}


def reference(family: str, bits: int):
    """Streaming reference hasher with update() and finalize()."""
    if family not in _REFERENCES:
        raise ValueError(f"no reference implementation for {family!r}")
    if bits not in PARAMETERS:
        raise ValueError(f"unsupported digest size {bits!r}")
    return _REFERENCES[family](bits)


def reference_digest(family: str, bits: int, data: bytes) -> bytes:
    """Digest of data computed by the reference library for family/bits."""
    ref = reference(family, bits)
    ref.update(data)
    return ref.finalize()


def verify(family: str, bits: int, data: bytes) -> bool:
    """True if the pure-Python digest matches the reference one."""
    ours = new(f"{family}-{bits}", data).digest()
    return ours == reference_digest(family, bits, data)
