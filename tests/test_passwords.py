import pytest

from authapi.core.passwords import SCHEME, hash_password, verify_password


def test_hash_format():
    scheme, n, r, p, salt, key = hash_password("secret").split("$")

    assert scheme == SCHEME
    assert (int(n), int(r), int(p)) == (2**14, 8, 1)
    assert salt and key


def test_verify_matching_password():
    assert verify_password("secret", hash_password("secret"))


def test_verify_wrong_password():
    assert not verify_password("Secret", hash_password("secret"))


def test_hashes_are_salted():
    assert hash_password("secret") != hash_password("secret")


@pytest.mark.parametrize(
    "stored",
    [
        "secret",
        "",
        "bcrypt$1$2$3$c2FsdA==$a2V5",
        "scrypt$16384$8$1$not base64!$a2V5",
        "scrypt$1000$8$1$c2FsdA==$a2V5",
    ],
)
def test_unrecognised_stored_value_never_matches(stored):
    assert not verify_password("secret", stored)
