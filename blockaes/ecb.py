"""Electronic codebook mode with the padding scheme of the ``blockaes`` format.

The plaintext is always followed by one to sixteen padding bytes.  Every
padding byte holds the number of padding bytes minus one, so an input whose
length is a multiple of the block size gains a whole block of ``0x0f``.
"""

from __future__ import annotations

from typing import BinaryIO, Iterator

from .cipher import BLOCK_SIZE, BlockCipher


class ECBError(ValueError):
    """Raised when data cannot be processed in ECB mode."""


def _pad(tail: bytes) -> bytes:
    fill = BLOCK_SIZE - len(tail)
    return tail + bytes([fill - 1]) * fill


def _encrypted_blocks(data: bytes, cipher: BlockCipher) -> Iterator[bytes]:
    full = len(data) - len(data) % BLOCK_SIZE
    for start in range(0, full, BLOCK_SIZE):
        yield cipher.encrypt_block(data[start : start + BLOCK_SIZE])
    yield cipher.encrypt_block(_pad(data[full:]))


def _decrypted_blocks(data: bytes, cipher: BlockCipher) -> Iterator[bytes]:
    if len(data) % BLOCK_SIZE:
        raise ECBError(f"the size of the data must be a multiple of {BLOCK_SIZE} to decrypt")
    if not data:
        raise ECBError("there is no block to decrypt")
    last = len(data) - BLOCK_SIZE
    for start in range(0, last, BLOCK_SIZE):
        yield cipher.decrypt_block(data[start : start + BLOCK_SIZE])
    final = cipher.decrypt_block(data[last:])
    yield final[: max(0, BLOCK_SIZE - 1 - final[-1])]


def encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt ``data`` with ``key`` in ECB mode, padding the last block."""
    return b"".join(_encrypted_blocks(bytes(data), BlockCipher(key)))


def decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt ECB ``data`` with ``key`` and strip the padding."""
    cipher = BlockCipher(key)
    blocks = list(_decrypted_blocks(bytes(data), cipher))
    return b"".join(blocks)


def encrypt_stream(source: BinaryIO, target: BinaryIO, key: bytes) -> None:
    """Encrypt everything readable from ``source`` into ``target``."""
    cipher = BlockCipher(key)
    for block in _encrypted_blocks(source.read(), cipher):
        target.write(block)


def decrypt_stream(source: BinaryIO, target: BinaryIO, key: bytes) -> None:
    """Decrypt everything readable from ``source`` into ``target``.

    The size of the input is checked before anything is written.
    """
    cipher = BlockCipher(key)
    data = source.read()
    if len(data) % BLOCK_SIZE or not data:
        list(_decrypted_blocks(data, cipher))
    for block in _decrypted_blocks(data, cipher):
        target.write(block)