import pytest

from grouptherapy.utils.passwords import hash_password, verify_password


def test_hash_and_verify_password():
    h = hash_password("topsecret")
    assert h.startswith("$argon2id$")
    assert verify_password("topsecret", h) is True
    assert verify_password("wrong", h) is False


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_verify_rejects_blank_and_malformed_inputs():
    h = hash_password("topsecret")
    assert verify_password("", h) is False
    assert verify_password("topsecret", "") is False
    assert verify_password("topsecret", "not-a-hash") is False


def test_hash_password_rejects_empty():
    with pytest.raises(ValueError):
        hash_password("")
