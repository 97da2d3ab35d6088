import pytest

from blockaes.cipher import BlockCipher, add_round_key

PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")


@pytest.mark.parametrize(
    "size,expected",
    [
        (16, "69c4e0d86a7b0430d8cdb78070b4c55a"),
        (24, "dda97ca4864cdfe06eaf70a0ec0d7191"),
        (32, "8ea2b7ca516745bfeafc49904b496089"),
    ],
)
def test_fips_vectors(size, expected):
    cipher = BlockCipher(bytes(range(size)))
    assert cipher.encrypt_block(PLAINTEXT).hex() == expected
    assert cipher.decrypt_block(bytes.fromhex(expected)) == PLAINTEXT


@pytest.mark.parametrize("size,rounds", [(16, 10), (24, 12), (32, 14)])
def test_round_count(size, rounds):
    assert BlockCipher(bytes(size)).rounds == rounds


@pytest.mark.parametrize("size", [16, 24, 32])
def test_round_trip(size):
    cipher = BlockCipher(bytes(reversed(range(size))))
    for block in (bytes(16), bytes(range(16)), b"\xff" * 16):
        encrypted = cipher.encrypt_block(block)
        assert len(encrypted) == 16
        assert encrypted != block
        assert cipher.decrypt_block(encrypted) == block


def test_different_keys_give_different_ciphertexts():
    a = BlockCipher(bytes(16)).encrypt_block(PLAINTEXT)
    b = BlockCipher(bytes(15) + b"\x01").encrypt_block(PLAINTEXT)
    assert a != b


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_bad_block_length(length):
    cipher = BlockCipher(bytes(16))
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(length))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(length))


def test_bad_key_length():
    with pytest.raises(ValueError):
        BlockCipher(bytes(10))


def test_add_round_key_with_zero_words_is_identity():
    state = [[16 * r + c for c in range(4)] for r in range(4)]
    assert add_round_key(state, [0] * 8, 4) == state


def test_add_round_key_places_word_bytes_in_column():
    state = [[0] * 4 for _ in range(4)]
    words = [0x01020304, 0, 0, 0]
    result = add_round_key(state, words, 0)
    assert [row[0] for row in result] == [0x01, 0x02, 0x03, 0x04]
    assert all(row[1:] == [0, 0, 0] for row in result)


def test_add_round_key_twice_restores_state():
    state = [[16 * r + c for c in range(4)] for r in range(4)]
    words = [0xDEADBEEF, 0x01234567, 0x89ABCDEF, 0x0F1E2D3C]
    assert add_round_key(add_round_key(state, words, 0), words, 0) == state