"""No-frills PCG32 generator: 64-bit LCG state, 32-bit permuted output.

Matches ``pcg32_srandom_r`` / ``pcg32_random_r`` of the official PCG library
bit for bit. Python integers do not wrap, so every result is masked back to
64 (state) or 32 (output) bits.
"""

from dataclasses import FrozenInstanceError, dataclass, replace
from typing import Iterator

# PCG32 LCG multiplier.
MUL = 6364136223846793005

# PCG32_INITIALIZER of the official library.
DEFAULT_STATE = 0x853C49E6748FEA9B
DEFAULT_INC = 0xDA3E39CB94B95BDB

MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1


def rotr32(value: int, rot: int) -> int:
    """32-bit circular right rotation; ``rot`` is taken modulo 32."""
    rot &= 31
    return ((value >> rot) | (value << ((-rot) & 31))) & MASK32


@dataclass(unsafe_hash=True)
class PCG32:
    """A PCG32 random number generator.

    ``PCG32()`` is the library's default-seeded instance. Use
    :meth:`PCG32.new` to seed from an ``(initstate, initseq)`` pair.
    """

    state: int = DEFAULT_STATE
    inc: int = DEFAULT_INC

    def __post_init__(self) -> None:
        self.state &= MASK64
        # the increment must stay odd for the LCG to reach its full period
        object.__setattr__(self, "inc", (self.inc & MASK64) | 1)

    def __setattr__(self, name: str, value) -> None:
        if name == "inc" and "inc" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'inc'")
        super().__setattr__(name, value)

    @classmethod
    def new(cls, initstate: int, initseq: int) -> "PCG32":
        """Seed a generator with two 64-bit values.

        ``initstate`` picks the starting point and ``initseq`` the output
        stream. Any integer is accepted: both are reduced modulo 2**64, and the
        most significant bit of ``initseq`` is dropped when it is shifted into
        the increment.
        """
        initstate &= MASK64
        inc = ((initseq << 1) | 1) & MASK64
        state = ((inc + initstate) * MUL + inc) & MASK64
        return cls(state, inc)

    def generate(self) -> int:
        """Return the next uniformly distributed 32-bit unsigned integer."""
        oldstate = self.state
        self.state = (oldstate * MUL + self.inc) & MASK64
        xorshifted = (((oldstate >> 18) ^ oldstate) >> 27) & MASK32
        return rotr32(xorshifted, oldstate >> 59)

    next_u32 = generate

    def copy(self) -> "PCG32":
        """Independent generator that continues with the same sequence."""
        return replace(self)

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.generate()
