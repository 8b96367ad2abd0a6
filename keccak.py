"""
Keccak-224/256/384/512 and SHA3-224/256/384/512 digests.

hashlib-style objects on top of the pure-Python sponge:

  k = Keccak(256).update(b"hello").update(b" world")
  k.hexdigest()  # 64 lowercase hex characters

Keccak uses the original 0x01 padding (as in Ethereum's keccak256), Sha3 the
FIPS 202 0x06 padding. Both only differ in that one byte.
"""
from typing import Dict, Optional, Tuple, Union

from keccak_sponge import KECCAK_SUFFIX, SHA3_SUFFIX, KeccakSponge


# Digest size in bits -> (rate, capacity) in bits
PARAMETERS: Dict[int, Tuple[int, int]] = {
    224: (1152, 448),
    256: (1088, 512),
    384: (832, 768),
    512: (576, 1024),
}

Data = Union[bytes, bytearray, memoryview, str]


class Keccak:
    """Keccak digest of one of the four standard sizes.

    - update() may be called any number of times; split input hashes the
      same as the concatenation.
    - digest()/hexdigest()/hash() don't finalise the object, update() can
      continue afterwards.
    - clear() resets it for an unrelated message.
    """

    family: str = "keccak"
    suffix: int = KECCAK_SUFFIX

    def __init__(self, bits: int = 256, data: Optional[Data] = None) -> None:
        if bits not in PARAMETERS:
            raise ValueError(f"unsupported digest size {bits!r}, "
                             f"expected one of {sorted(PARAMETERS)}")
        rate, capacity = PARAMETERS[bits]
        self.bits: int = bits
        self._sponge: KeccakSponge = KeccakSponge(rate, capacity, bits, self.suffix)
        if data is not None:
            self.update(data)

    @property
    def name(self) -> str:
        return f"{self.family}-{self.bits}"

    @property
    def digest_size(self) -> int:
        return self._sponge.digest_size

    @property
    def block_size(self) -> int:
        return self._sponge.block_size

    def update(self, data: Data) -> "Keccak":
        self._sponge.update(data)
        return self

    def digest(self) -> bytes:
        return self._sponge.hash()

    def hexdigest(self) -> str:
        """Lowercase hex digest, two characters per byte."""
        return self.digest().hex()

    # Same as hexdigest()
    hash = hexdigest

    def clear(self) -> None:
        self._sponge.clear()

    def copy(self) -> "Keccak":
        other = type(self).__new__(type(self))
        other.bits = self.bits
        other._sponge = self._sponge.copy()
        return other

    def __repr__(self) -> str:
        return f"<{self.name} object at {id(self):#x}>"


class Sha3(Keccak):
    """FIPS 202 SHA-3 digest; same sponge, 0x06 domain separation."""

    family = "sha3"
    suffix = SHA3_SUFFIX


_FAMILIES = {cls.family: cls for cls in (Keccak, Sha3)}


def new(name: str, data: Optional[Data] = None) -> Keccak:
    """Construct a digest object by name, e.g. "keccak-256" or "sha3_512"."""
    family, _, bits = name.lower().replace("_", "-").rpartition("-")
    cls = _FAMILIES.get(family)
    if cls is None or not bits.isdigit():
        raise ValueError(f"unknown digest name {name!r}")
    return cls(int(bits), data)


# One-shot helpers
def keccak_224(data: Data) -> bytes:
    return Keccak(224, data).digest()


def keccak_256(data: Data) -> bytes:
    return Keccak(256, data).digest()


def keccak_384(data: Data) -> bytes:
    return Keccak(384, data).digest()


def keccak_512(data: Data) -> bytes:
    return Keccak(512, data).digest()


def sha3_224(data: Data) -> bytes:
    return Sha3(224, data).digest()


def sha3_256(data: Data) -> bytes:
    return Sha3(256, data).digest()


def sha3_384(data: Data) -> bytes:
    return Sha3(384, data).digest()


def sha3_512(data: Data) -> bytes:
    return Sha3(512, data).digest()
