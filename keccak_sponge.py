"""
Sponge construction over the Keccak-f permutation.

The sponge absorbs input one rate-sized block at a time, XORing it into the
state and permuting after every block. On finalisation the leftover bytes are
padded (pad10*1, started by a domain-separation suffix byte) and absorbed as
one last block, and the digest is squeezed out of the state.
"""
from typing import List, Union

from keccakf import KeccakF


# Domain separation suffix of the original Keccak submission
KECCAK_SUFFIX: int = 0x01
# Domain separation suffix of the FIPS 202 SHA-3 hashes
SHA3_SUFFIX: int = 0x06


def _as_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or a bytes-like object, got {type(data).__name__}")


class KeccakSponge:
    """Keccak sponge with a fixed rate, capacity and output length.

    Usage:
      s = KeccakSponge(1088, 512, 256).update(b"hello").update(b" world")
      out = s.hash()  # 32 bytes, s can still absorb more input

    Notes:
    - rate + capacity is the permutation width in bits (1600 for the four
      standard digests). Parameters are not validated here.
    - hash() works on a copy, so digests can be taken at any point while
      more input keeps coming in.
    """

    def __init__(self, rate: int, capacity: int, output_bits: int, suffix: int = KECCAK_SUFFIX) -> None:
        self.rate: int = rate
        self.capacity: int = capacity
        self.output_bits: int = output_bits
        self.suffix: int = suffix
        # Permutation width in bits
        self.width: int = rate + capacity
        # Bytes absorbed per permutation
        self.block_size: int = rate // 8
        self.digest_size: int = output_bits // 8
        self.keccak_f: KeccakF = KeccakF(self.width // 25)
        # 5x5 lanes, stored as a flat list of 25 ints
        self._s: List[int] = [0] * 25
        # Input bytes that haven't filled a whole rate block yet
        self._buf: bytearray = bytearray()

    def update(self, data: Union[bytes, bytearray, memoryview, str]) -> "KeccakSponge":
        """Absorb more input.

        Data is appended to the pending buffer and every full block is
        absorbed right away. Strings are hashed as their UTF-8 encoding.
        Returns self so calls can be chained.
        """
        self._buf += _as_bytes(data)
        r = self.block_size
        i = 0
        while len(self._buf) - i >= r:
            self.absorb(self._buf[i:i + r])
            i += r
        if i:
            del self._buf[:i]
        return self

    def absorb(self, block: Union[bytes, bytearray]) -> None:
        """XOR one block into the state and permute.

        The block is zero-extended to the full state width, read as 25
        little-endian 8-byte lanes.
        """
        m = bytes(block) + bytes(self.width // 8 - len(block))
        for j in range(25):
            self._s[j] ^= int.from_bytes(m[8 * j:8 * j + 8], "little")
        self.keccak_f.permute(self._s)

    def pad(self) -> bytes:
        """Return the pending buffer followed by its padding.

        With one byte of room left the suffix and the final 0x80 bit share a
        single byte (0x81 for Keccak). Otherwise: suffix, zeros, 0x80.
        """
        room = self.block_size - len(self._buf)
        if room == 1:
            padding = bytes([self.suffix | 0x80])
        else:
            padding = bytes([self.suffix]) + bytes(room - 2) + b"\x80"
        block = bytes(self._buf) + padding
        assert len(block) == self.block_size, "padded block does not match the block size"
        return block

    def absorb_all(self) -> None:
        """Pad and absorb whatever is left in the buffer."""
        self.absorb(self.pad())
        self._buf.clear()

    def _extract(self) -> bytes:
        # Lane count as derived from the capacity, never more than the state holds
        lanes = min(25, self.capacity // 16 + 1)
        return b"".join(lane.to_bytes(8, "little") for lane in self._s[:lanes])

    def squeeze(self) -> bytes:
        """Squeeze digest_size bytes out of the state.

        If one extraction is not enough, the state is permuted again between
        extractions.
        """
        out = bytearray()
        while True:
            out += self._extract()
            if len(out) >= self.digest_size:
                break
            self.keccak_f.permute(self._s)
        return bytes(out[:self.digest_size])

    def clear(self) -> None:
        """Forget all input, back to the freshly constructed state."""
        self._buf.clear()
        self._s = [0] * 25

    def copy(self) -> "KeccakSponge":
        """Independent copy sharing only the (stateless) permutation."""
        other = KeccakSponge.__new__(KeccakSponge)
        other.__dict__.update(self.__dict__)
        other._s = list(self._s)
        other._buf = bytearray(self._buf)
        return other

    def hash(self) -> bytes:
        """Finalise a copy of the sponge and return its digest.

        The sponge itself is left untouched and may absorb more input.
        """
        sponge = self.copy()
        sponge.absorb_all()
        return sponge.squeeze()
