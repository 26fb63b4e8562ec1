import pytest

from admincommon.encrypt import bcrypt_check, bcrypt_encrypt


@pytest.mark.parametrize("origin", ["123456", "123456789.."])
def test_encrypt_round_trip(origin):
    hashed = bcrypt_encrypt(origin)
    assert bcrypt_check(origin, hashed) is True


@pytest.mark.parametrize(
    "plain, hashed, want",
    [
        (
            "simple-admin",
            "$2a$10$RGY8FVLUSKNMdKQr/y2oi.kh4r/ns6hbpJc.0RP56jd3gazeOJa42",
            True,
        ),
    ],
)
def test_bcrypt_check(plain, hashed, want):
    assert bcrypt_check(plain, hashed) is want


def test_hash_uses_default_cost_prefix():
    assert bcrypt_encrypt("123456").startswith("$2a$10$")


def test_wrong_password_fails():
    hashed = bcrypt_encrypt("123456")
    assert bcrypt_check("1234567", hashed) is False


def test_hashes_are_salted():
    first = bcrypt_encrypt("123456")
    second = bcrypt_encrypt("123456")
    assert first[:7] == second[:7] == "$2a$10$"
    assert first[7:29] != second[7:29]
    assert bcrypt_check("123456", first) is True
    assert bcrypt_check("123456", second) is True


def test_malformed_hash_fails():
    assert bcrypt_check("123456", "not-a-hash") is False


def test_overlong_password_rejected():
    with pytest.raises(ValueError):
        bcrypt_encrypt("a" * 73)