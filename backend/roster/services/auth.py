"""
Authentication gate for the record screen.

One fixed credential pair, compared verbatim (case-sensitive, no
trimming). There is no lockout or attempt counting.
"""

from typing import Optional
from pydantic import BaseModel

from roster.logging_config import get_logger, log_with_context

logger = get_logger("auth")

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class LoginOutcome(BaseModel):
    """Result of one login attempt."""
    success: bool
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "LoginOutcome":
        return cls(success=True)

    @classmethod
    def failure(cls) -> "LoginOutcome":
        return cls(success=False, message=INVALID_CREDENTIALS_MESSAGE)


class Authenticator:
    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password

    def attempt_login(self, username: str, password: str) -> LoginOutcome:
        if username == self._username and password == self._password:
            log_with_context(logger, "INFO", "Login succeeded", context={"username": username})
            return LoginOutcome.ok()

        log_with_context(logger, "WARNING", "Login failed", context={"username": username})
        return LoginOutcome.failure()


class OperatorSession:
    """
    Authenticated-or-not flag for the single operator.

    The session holds no identity: a successful login flips it to
    authenticated, a failed one leaves it untouched.
    """

    def __init__(self, authenticator: Authenticator):
        self._authenticator = authenticator
        self.authenticated = False

    def login(self, username: str, password: str) -> LoginOutcome:
        outcome = self._authenticator.attempt_login(username, password)
        if outcome.success:
            self.authenticated = True
        return outcome

    def logout(self):
        if self.authenticated:
            log_with_context(logger, "INFO", "Logged out")
        self.authenticated = False
