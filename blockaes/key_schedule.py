"""The AES key expansion that produces the round-key words."""

from __future__ import annotations

from .transforms import SBOX

NB = 4
"""Number of 32-bit columns in a block."""

RCON = tuple(value << 24 for value in (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36))

KEY_SIZES = (16, 24, 32)


def sub_word(word: int) -> int:
    """Apply the S-box to each of the four bytes of a word."""
    return int.from_bytes(bytes(SBOX[b] for b in word.to_bytes(4, "big")), "big")


def rot_word(word: int) -> int:
    """Rotate a 32-bit word one byte to the left."""
    return ((word << 8) | (word >> 24)) & 0xFFFFFFFF


def expand_key(key: bytes) -> tuple[int, ...]:
    """Expand a 16, 24 or 32 byte key into its ``4 * (rounds + 1)`` round-key words."""
    key = bytes(key)
    if len(key) not in KEY_SIZES:
        raise ValueError("the key must be of size 128, 192 or 256 bits")
    nk = len(key) // 4
    rounds = nk + 6
    words = [int.from_bytes(key[i : i + 4], "big") for i in range(0, len(key), 4)]
    for i in range(nk, NB * (rounds + 1)):
        temp = words[-1]
        if i % nk == 0:
            temp = sub_word(rot_word(temp)) ^ RCON[i // nk - 1]
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        words.append(words[i - nk] ^ temp)
    return tuple(words)