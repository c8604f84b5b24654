"""A password-protected door lock with a limited number of attempts."""

from __future__ import annotations

MAX_PASSWORD_LENGTH = 20
MAX_ATTEMPTS = 3


class AccessDenied(Exception):
    """Raised once the allowed number of wrong attempts has been used up."""


class DoorLock:
    """A door that opens for the password its user set."""

    def __init__(self, max_attempts: int = MAX_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.attempts = 0
        self._password: str | None = None

    @property
    def attempts_left(self) -> int:
        """Number of wrong attempts that may still be made."""
        return max(self.max_attempts - self.attempts, 0)

    @property
    def locked_out(self) -> bool:
        """True when no attempts are left."""
        return self.attempts >= self.max_attempts

    def set_password(self, password: str) -> None:
        """Set the password: one word of at most MAX_PASSWORD_LENGTH characters."""
        if not password or any(ch.isspace() for ch in password):
            raise ValueError("password must be a single non-empty word")
        if len(password) > MAX_PASSWORD_LENGTH:
            raise ValueError(
                f"password must be at most {MAX_PASSWORD_LENGTH} characters"
            )
        self._password = password

    def unlock(self, attempt: str) -> bool:
        """Return True if the attempt opens the door, False if it is wrong.

        Raises AccessDenied when the last allowed attempt fails or after that.
        """
        if self._password is None:
            raise RuntimeError("no password has been set")
        if self.locked_out:
            raise AccessDenied("maximum attempts reached")
        if attempt == self._password:
            return True
        self.attempts += 1
        if self.locked_out:
            raise AccessDenied("maximum attempts reached")
        return False