# blockaes

A small, dependency-free implementation of the AES block cipher (128, 192
and 256-bit keys) with an ECB mode for whole files and a command-line tool.

It is meant for learning and experimentation: ECB mode leaks patterns in the
plaintext, the padding scheme is specific to this package, and the
implementation is not hardened against side channels. Do not use it to
protect real data.

## Installation

```
pip install .
```

## Command line

```
blockaes -i INPUT -o OUTPUT [-d] [-k KEY] [-m MODE]
```

The same command is available as `python -m blockaes.cli`.

| Option | Meaning |
| --- | --- |
| `-i FILE`, `--input FILE` | read data from `FILE` |
| `-o FILE`, `--output FILE` | write the result to `FILE` |
| `-k KEY`, `--key KEY` | key in hexadecimal, optionally prefixed with `0x`; 128, 192 or 256 bits |
| `-m MODE`, `--mode MODE` | one of `ECB`, `CBC`, `CFB`, `GCM` (default `ECB`) |
| `-d`, `--decrypt` | decrypt instead of encrypt |
| `-h`, `--help` | print the help text and exit |

Both an input and an output file are required. Without `-k` the key
`000102030405060708090a0b0c0d0e0f` is used.

```
blockaes -i notes.txt -o notes.bin -k 000102030405060708090a0b0c0d0e0f
blockaes -d -i notes.bin -o notes.out -k 000102030405060708090a0b0c0d0e0f
```

The key is read two hexadecimal digits at a time, up to 32 bytes. It must
come to 16, 24 or 32 bytes; an odd number of digits is rejected, and
characters beyond the 32nd byte are ignored unless exactly one is left over.

Errors (a malformed key, an unknown mode, a missing or unopenable file,
ciphertext that is empty or whose length is not a multiple of 16) are written
to standard error and the command returns the exit status 1. The output file
is opened before the mode is checked, so it may be created even when the
operation is then refused.

## Library

```python
from blockaes.cipher import BlockCipher
from blockaes import ecb

key = bytes(range(16))

cipher = BlockCipher(key)
block = cipher.encrypt_block(bytes(16))
assert cipher.decrypt_block(block) == bytes(16)

ciphertext = ecb.encrypt(b"attack at dawn", key)
assert ecb.decrypt(ciphertext, key) == b"attack at dawn"
```

- `BlockCipher(key)` expands a 16, 24 or 32 byte key (anything else raises
  `ValueError`); `encrypt_block` and `decrypt_block` take exactly 16 bytes.
- `ecb.encrypt(data, key)` and `ecb.decrypt(data, key)` work on bytes.
- `ecb.encrypt_stream(source, target, key)` and
  `ecb.decrypt_stream(source, target, key)` read a whole binary file object
  and write the result to another. `decrypt_stream` checks the input size
  before writing anything.
- Ciphertext that is empty or not a multiple of 16 bytes raises
  `ecb.ECBError`, a subclass of `ValueError`.
- `blockaes.cli.parse_key(text)` parses a key as the command line does and
  raises `blockaes.cli.KeyFormatError` when it is malformed.

### Padding

Encryption always appends a final block. When the input length is a multiple
of 16, that block is sixteen bytes of `0x0f`; otherwise the `n` free bytes of
the last block are each set to `n - 1`. On decryption, if the last byte of the
final block is `p`, only its first `15 - p` bytes are kept (none if `p` is
larger than 15). This scheme is not PKCS#7.

### Building blocks

The round steps are available for study:

- `blockaes.transforms`: `sub_bytes`, `shift_rows`, `mix_columns` and their
  inverses, working on a state given as four rows of four bytes and returning
  a new state; the field helpers `xtime` and `gf_mul`; the tables `SBOX` and
  `INV_SBOX`.
- `blockaes.key_schedule`: `expand_key`, `sub_word`, `rot_word` and the
  round constants `RCON`.
- `blockaes.cipher`: `add_round_key` and `BlockCipher`.

## What it does not do

Only ECB is implemented. The names `CBC`, `CFB` and `GCM` are accepted by
`-m`, but the command then stops with "Mode not implemented yet." There is no
initialisation vector, authentication or key derivation from a passphrase.

## Running the tests

```
pip install .[test]
pytest
```