"""Single-block AES encryption and decryption."""

from __future__ import annotations

from typing import Sequence

from .key_schedule import NB, expand_key
from .transforms import (
    State,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    sub_bytes,
)

BLOCK_SIZE = 16


def add_round_key(state: Sequence[Sequence[int]], round_keys: Sequence[int], start: int) -> State:
    """XOR the state with the four round-key words beginning at ``start``."""
    return [
        [
            byte ^ ((round_keys[start + col] >> (24 - 8 * line)) & 0xFF)
            for col, byte in enumerate(row)
        ]
        for line, row in enumerate(state)
    ]


def _to_state(block: bytes) -> State:
    return [list(block[row::4]) for row in range(4)]


def _from_state(state: State) -> bytes:
    return bytes(byte for column in zip(*state) for byte in column)


class BlockCipher:
    """AES with a fixed key, working on one 16-byte block at a time."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        self._round_keys = expand_key(key)
        self.rounds = len(key) // 4 + 6

    @staticmethod
    def _check(block: bytes) -> bytes:
        block = bytes(block)
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"a block must be {BLOCK_SIZE} bytes long")
        return block

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        w = self._round_keys
        state = add_round_key(_to_state(self._check(block)), w, 0)
        for round_number in range(1, self.rounds):
            state = mix_columns(shift_rows(sub_bytes(state)))
            state = add_round_key(state, w, round_number * NB)
        state = shift_rows(sub_bytes(state))
        state = add_round_key(state, w, self.rounds * NB)
        return _from_state(state)

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        w = self._round_keys
        state = add_round_key(_to_state(self._check(block)), w, self.rounds * NB)
        for round_number in range(self.rounds - 1, 0, -1):
            state = inv_sub_bytes(inv_shift_rows(state))
            state = inv_mix_columns(add_round_key(state, w, round_number * NB))
        state = inv_sub_bytes(inv_shift_rows(state))
        state = add_round_key(state, w, 0)
        return _from_state(state)