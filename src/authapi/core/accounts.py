from authapi.core.errors import AuthError, StoreError, UnexpectedError, ValidationError
from authapi.core.passwords import hash_password, verify_password
from authapi.shared import Logger
from authapi.store import Record, RecordStore

logger = Logger(__name__).get_logger()


class AccountService:
    """Registration, login and logout against a table of user records.

    The `islogin` column is the only state that changes after registration:
    login sets it, logout clears it. It is a presence flag, not a session.
    """

    def __init__(self, store: RecordStore, table: str = "users"):
        self.store = store
        self.table = table

    def register(self, username: str | None, email: str | None, password: str | None) -> Record | None:
        if not username or not email or not password:
            raise ValidationError("Username, Email, and Password are required")

        # Duplicate emails are left to the store's unique constraint
        rows = self.store.insert(
            self.table,
            {
                "username": username,
                "email": email,
                "password": hash_password(password),
                "islogin": False,
            },
        )
        logger.info("Registered user %s", email)
        return rows[0] if rows else None

    def login(self, email: str | None, password: str | None) -> Record:
        if not email or not password:
            raise ValidationError("Email and password are required")

        try:
            rows = self.store.select(self.table, {"email": email}, limit=2)
        except StoreError as e:
            logger.warning("Lookup for %s failed: %s", email, e.message)
            raise AuthError() from e

        if not rows:
            logger.info("Login rejected, no user %s", email)
            raise AuthError()

        if len(rows) > 1:
            logger.warning("Login rejected, more than one user with email %s", email)
            raise AuthError()

        user = rows[0]
        if not verify_password(password, user.get("password") or ""):
            logger.info("Login rejected, wrong password for %s", email)
            raise AuthError()

        updated = self._set_islogin(email, True)
        if not updated:
            logger.warning("Flag update for %s matched no rows, islogin unchanged", email)
            return user

        logger.info("User %s logged in", email)
        return updated[0]

    def logout(self, email: str | None):
        if not email:
            raise ValidationError("Email is required")

        # Unknown emails match no rows and still count as logged out
        self._set_islogin(email, False)
        logger.info("User %s logged out", email)

    def _set_islogin(self, email: str, value: bool) -> list[Record]:
        try:
            return self.store.update(self.table, {"islogin": value}, {"email": email})
        except StoreError as e:
            logger.error("Setting islogin=%s for %s failed: %s", value, email, e.message)
            raise UnexpectedError() from e
