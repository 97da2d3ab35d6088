import pytest

from blockaes.key_schedule import RCON, expand_key, rot_word, sub_word

FIPS_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")


def test_rot_word_moves_top_byte():
    assert rot_word(0x01020304) == 0x02030401


def test_rot_word_four_times_is_identity():
    word = 0xDEADBEEF
    result = word
    for _ in range(4):
        result = rot_word(result)
    assert result == word


def test_sub_word_uses_sbox():
    assert sub_word(0x00010203) == 0x637C777B


@pytest.mark.parametrize("size,count", [(16, 44), (24, 52), (32, 60)])
def test_expanded_length(size, count):
    assert len(expand_key(bytes(range(size)))) == count


@pytest.mark.parametrize("size", [16, 24, 32])
def test_first_words_are_key(size):
    key = bytes(range(size))
    words = expand_key(key)
    rebuilt = b"".join(w.to_bytes(4, "big") for w in words[: size // 4])
    assert rebuilt == key


def test_fips_expansion_words():
    words = expand_key(FIPS_KEY)
    assert words[4] == 0xA0FAFE17
    assert words[43] == 0xB6630CA6


def test_first_derived_word_uses_rcon():
    key = bytes(16)
    words = expand_key(key)
    assert words[4] == sub_word(rot_word(0)) ^ RCON[0]


def test_words_fit_32_bits():
    assert all(0 <= w <= 0xFFFFFFFF for w in expand_key(bytes(range(32))))


@pytest.mark.parametrize("size", [0, 8, 15, 17, 20, 33])
def test_bad_key_length(size):
    with pytest.raises(ValueError):
        expand_key(bytes(size))