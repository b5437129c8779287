"""RC5-w/r/b block cipher.

Word arithmetic is done on Python ints and masked to ``w`` bits after every
addition, subtraction and rotation, so the same code serves all three word
sizes. Registers are read and written little-endian.
"""

from collections.abc import Callable

from .errors import (
    BlockAlignmentError,
    InvalidKeyLengthError,
    InvalidRoundCountError,
    InvalidWordSizeError,
    RC5Error,
)

__all__ = [
    "MAGIC_CONSTANTS",
    "MAX_KEY_BITS",
    "MAX_ROUNDS",
    "RC5",
    "expand_key",
    "magic_constants",
    "rotate_left",
    "rotate_right",
    "validate_parameters",
    "word_mask",
]

# (P_w, Q_w) derived from e and the golden ratio
MAGIC_CONSTANTS: dict[int, tuple[int, int]] = {
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
}

MAX_ROUNDS = 255
MAX_KEY_BITS = 2040


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_parameters(w: int, rounds: int, key: bytes) -> None:
    """Reject unsupported parameters before any key material is touched."""
    if not _is_int(w) or w not in MAGIC_CONSTANTS:
        raise InvalidWordSizeError(
            "Invalid word size. Only 16, 32, or 64 are allowed."
        )

    if not _is_int(rounds) or not 0 <= rounds <= MAX_ROUNDS:
        raise InvalidRoundCountError(
            f"Invalid number of rounds. Must be between 0 and {MAX_ROUNDS}."
        )

    if len(key) * 8 > MAX_KEY_BITS:
        raise InvalidKeyLengthError(
            f"Invalid key length. Key size must not exceed {MAX_KEY_BITS} bits."
        )


def magic_constants(w: int) -> tuple[int, int]:
    try:
        return MAGIC_CONSTANTS[w]
    except KeyError as e:
        raise InvalidWordSizeError(
            "Invalid word size. Only 16, 32, or 64 are allowed."
        ) from e


def word_mask(w: int) -> int:
    return (1 << w) - 1


def rotate_left(value: int, shift: int, w: int) -> int:
    # only the low log2(w) bits of the amount count
    mask = word_mask(w)
    shift %= w
    value &= mask
    return ((value << shift) | (value >> (w - shift))) & mask


def rotate_right(value: int, shift: int, w: int) -> int:
    mask = word_mask(w)
    shift %= w
    value &= mask
    return ((value >> shift) | (value << (w - shift))) & mask


def expand_key(w: int, rounds: int, key: bytes) -> tuple[int, ...]:
    """Derive the ``2 * (rounds + 1)`` subkeys for ``key``.

    The key is split into little-endian words (at least one, zero-filled),
    the subkey table is seeded from ``P_w``/``Q_w`` and both arrays are then
    mixed for ``3 * max(t, c)`` steps.
    """
    p, q = magic_constants(w)
    mask = word_mask(w)

    word_bytes = w // 8
    c = -(-max(len(key), 1) // word_bytes)
    words = [
        int.from_bytes(key[k * word_bytes : (k + 1) * word_bytes], "little") & mask
        for k in range(c)
    ]

    t = 2 * (rounds + 1)
    schedule = [p]
    for _ in range(1, t):
        schedule.append((schedule[-1] + q) & mask)

    a = b = i = j = 0
    for _ in range(3 * max(t, c)):
        # B is added after the masked S[i] + A; rotate_left reduces the sum
        a = schedule[i] = rotate_left(((schedule[i] + a) & mask) + b, 3, w)
        b = words[j] = rotate_left(((words[j] + a) & mask) + b, a + b, w)
        i = (i + 1) % t
        j = (j + 1) % c

    return tuple(schedule)


class RC5:
    """RC5 with a fixed word size, round count and key.

    The key schedule is derived once in the constructor and never modified;
    every block transform reads from it.
    """

    def __init__(self, w: int, rounds: int, key: bytes = b""):
        key = bytes(key)
        validate_parameters(w, rounds, key)

        self.w = w
        self.rounds = rounds
        self.block_size = w // 4

        self.__half = w // 8
        self.__mask = word_mask(w)
        self.__schedule = expand_key(w, rounds, key)

    def __repr__(self):
        return f"RC5(w={self.w}, rounds={self.rounds})"

    @property
    def schedule(self) -> tuple[int, ...]:
        return self.__schedule

    def encrypt_block(self, block: bytes) -> bytes:
        a, b = self.__read(block)
        s = self.__schedule
        mask = self.__mask

        a = (a + s[0]) & mask
        b = (b + s[1]) & mask
        for i in range(1, self.rounds + 1):
            a = (rotate_left(a ^ b, b, self.w) + s[2 * i]) & mask
            b = (rotate_left(b ^ a, a, self.w) + s[2 * i + 1]) & mask

        return self.__write(a, b)

    def decrypt_block(self, block: bytes) -> bytes:
        a, b = self.__read(block)
        s = self.__schedule
        mask = self.__mask

        for i in range(self.rounds, 0, -1):
            b = rotate_right((b - s[2 * i + 1]) & mask, a, self.w) ^ a
            a = rotate_right((a - s[2 * i]) & mask, b, self.w) ^ b

        b = (b - s[1]) & mask
        a = (a - s[0]) & mask

        return self.__write(a, b)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt a block-aligned buffer, one block at a time."""
        return self.__transform(data, self.encrypt_block, "plaintext")

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt a block-aligned buffer, one block at a time."""
        return self.__transform(data, self.decrypt_block, "ciphertext")

    def __transform(
        self,
        data: bytes,
        block_function: Callable[[bytes], bytes],
        kind: str,
    ) -> bytes:
        if len(data) % self.block_size:
            raise BlockAlignmentError(
                f"Invalid {kind} length. "
                f"Must be a multiple of {self.block_size} bytes."
            )

        buffer = bytearray(data)
        for offset in range(0, len(buffer), self.block_size):
            end = offset + self.block_size
            buffer[offset:end] = block_function(bytes(buffer[offset:end]))

        return bytes(buffer)

    def __read(self, block: bytes) -> tuple[int, int]:
        if len(block) != self.block_size:
            raise RC5Error(
                f"Invalid block length {len(block)}. "
                f"Expected {self.block_size} bytes."
            )

        half = self.__half
        return (
            int.from_bytes(block[:half], "little"),
            int.from_bytes(block[half:], "little"),
        )

    def __write(self, a: int, b: int) -> bytes:
        half = self.__half
        return a.to_bytes(half, "little") + b.to_bytes(half, "little")
