import pytest

from passgauge.generator import CHARSET, WORDS, generate_passphrase, generate_random_password


def test_charset_and_wordlist():
    assert len(CHARSET) == 91
    assert len(set(CHARSET)) == len(CHARSET)
    assert len(WORDS) == 20


def test_random_password_length_and_charset():
    for _ in range(50):
        pw = generate_random_password(16)
        assert len(pw) == 16
        assert all(c in CHARSET for c in pw)
    assert len(generate_random_password()) == 16
    assert len(generate_random_password(40)) == 40


def test_passphrase_shape():
    for _ in range(50):
        pp = generate_passphrase(4)
        assert pp.count("-") == 3
        parts = pp.split("-")
        assert len(parts) == 4
        assert all(p in WORDS for p in parts)
    assert len(generate_passphrase(1).split("-")) == 1


def test_invalid_sizes_raise():
    with pytest.raises(ValueError):
        generate_random_password(0)
    with pytest.raises(ValueError):
        generate_passphrase(-1)
