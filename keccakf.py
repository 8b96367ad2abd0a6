"""
Keccak-f permutation in pure Python.

The state is a flat list of 25 lanes in "lane order": index = x + 5*y for
coordinates (x, y) with x,y in 0..4. A round is theta, rho+pi, chi, iota,
applied in that order. The permutation keeps no state of its own, so one
KeccakF can be shared by any number of sponges.
"""
from typing import List, Tuple


# Round constants for Keccak-f, one per round, used in table order
RC: Tuple[int, ...] = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Rotation offsets r[x][y]
ROTATIONS: Tuple[Tuple[int, ...], ...] = (
    (0, 36, 3, 41, 18),
    (1, 44, 10, 45, 2),
    (62, 6, 43, 15, 61),
    (28, 55, 25, 21, 56),
    (27, 20, 39, 8, 14),
)


class KeccakF:
    """Keccak-f[25 * lane_width] permutation.

    The number of rounds is derived from the lane width as
    12 + 2*log2(lane_width), which gives 24 rounds for 64-bit lanes.
    """

    def __init__(self, lane_width: int = 64) -> None:
        if lane_width <= 0 or lane_width & (lane_width - 1):
            raise ValueError(f"lane width must be a power of two, got {lane_width!r}")
        rounds = 12 + 2 * (lane_width.bit_length() - 1)
        if rounds > len(RC):
            raise ValueError(f"lane width {lane_width} needs {rounds} rounds, "
                             f"only {len(RC)} round constants")
        self.lane_width: int = lane_width
        self.rounds: int = rounds
        self._mask: int = (1 << lane_width) - 1

    @property
    def width(self) -> int:
        """Total state width in bits."""
        return 25 * self.lane_width

    # Rotate left within one lane
    def _rol(self, x: int, n: int) -> int:
        n %= self.lane_width
        if n == 0:
            return x
        return ((x << n) | (x >> (self.lane_width - n))) & self._mask

    def theta(self, s: List[int]) -> None:
        c = [s[x] ^ s[x + 5] ^ s[x + 10] ^ s[x + 15] ^ s[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ self._rol(c[(x + 1) % 5], 1) for x in range(5)]
        for i in range(25):
            s[i] ^= d[i % 5]

    def rho_pi(self, s: List[int]) -> List[int]:
        b = [0] * 25
        for y in range(5):
            for x in range(5):
                # (x, y) -> (y, 2x + 3y mod 5)
                b[y + 5 * ((2 * x + 3 * y) % 5)] = self._rol(s[x + 5 * y], ROTATIONS[x][y])
        return b

    def chi(self, s: List[int], b: List[int]) -> None:
        mask = self._mask
        for y in range(5):
            row = b[5 * y:5 * y + 5]
            for x in range(5):
                s[x + 5 * y] = (row[x] ^ ((~row[(x + 1) % 5]) & row[(x + 2) % 5])) & mask

    def iota(self, s: List[int], round_index: int) -> None:
        s[0] ^= RC[round_index] & self._mask

    def round(self, s: List[int], round_index: int) -> None:
        self.theta(s)
        self.chi(s, self.rho_pi(s))
        self.iota(s, round_index)

    def permute(self, s: List[int]) -> List[int]:
        """Apply all rounds to the 25-lane state in place and return it."""
        if len(s) != 25:
            raise ValueError(f"state must have 25 lanes, got {len(s)}")
        for i in range(self.rounds):
            self.round(s, i)
        return s

    __call__ = permute

    def __repr__(self) -> str:
        return f"KeccakF(lane_width={self.lane_width})"
