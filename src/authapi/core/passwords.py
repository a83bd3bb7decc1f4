import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from authapi.shared.logger import Logger

logger = Logger(__name__).get_logger()

SCHEME = "scrypt"
SALT_BYTES = 16
KEY_LENGTH = 32
N, R, P = 2**14, 8, 1


def hash_password(password: str) -> str:
    """
    Derive a salted scrypt key from `password`.

    Returns `scrypt$<n>$<r>$<p>$<salt>$<key>` with salt and key Base64-encoded,
    so the cost parameters can change without invalidating stored hashes.
    """
    salt = os.urandom(SALT_BYTES)
    key = Scrypt(salt=salt, length=KEY_LENGTH, n=N, r=R, p=P).derive(
        password.encode("utf-8")
    )
    return "$".join(
        [
            SCHEME,
            str(N),
            str(R),
            str(P),
            base64.b64encode(salt).decode(),
            base64.b64encode(key).decode(),
        ]
    )


def verify_password(password: str, stored: str) -> bool:
    try:
        scheme, n, r, p, salt_b64, key_b64 = stored.split("$")
        if scheme != SCHEME:
            raise ValueError(f"unknown scheme {scheme!r}")
        salt = base64.b64decode(salt_b64, validate=True)
        key = base64.b64decode(key_b64, validate=True)
        kdf = Scrypt(salt=salt, length=len(key), n=int(n), r=int(r), p=int(p))
    except (AttributeError, ValueError) as e:
        logger.warning("Stored password is not a recognised hash: %s", e)
        return False

    try:
        kdf.verify(password.encode("utf-8"), key)
    except InvalidKey:
        return False

    return True
