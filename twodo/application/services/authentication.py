"""Authentication service — the login flow with bounded password retries."""

import structlog

from twodo.application.ports import InputProvider, OutputSink
from twodo.application.services.credentials import CredentialHasher
from twodo.config import get_settings
from twodo.core.exceptions import AuthErr
from twodo.core.result import Err, Ok, Result
from twodo.domain.models.user import User
from twodo.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class AuthenticationFlow:
    """Looks a user up and checks their password, allowing max_attempts tries."""

    def __init__(
        self,
        store: UserRepository,
        input_provider: InputProvider,
        output: OutputSink,
        hasher: CredentialHasher,
        max_attempts: int | None = None,
    ):
        if max_attempts is None:
            max_attempts = get_settings().MAX_LOGIN_ATTEMPTS
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be a positive integer, got {max_attempts}")

        self.store = store
        self.input = input_provider
        self.output = output
        self.hasher = hasher
        self.max_attempts = max_attempts

    def authenticate_username(self, username: str) -> Result[User, AuthErr]:
        match self.store.find_by_unique_column(username):
            case Ok(user):
                return Ok(user)
            case Err(_):
                return Err(AuthErr.UserNotFound)

    def authenticate_password(self, user: User, password: str) -> bool:
        return self.hasher.verify(password, user.password)

    def login(self) -> Result[User, AuthErr]:
        username = self.input.read_line("Username: ").strip()
        found = self.authenticate_username(username)
        if found.is_err():
            logger.info("Login for unknown user", username=username)
            return found

        user = found.unwrap()
        for attempt in range(1, self.max_attempts + 1):
            password = self.input.read_secret("Password: ")
            if self.authenticate_password(user, password):
                logger.info("User logged in", user_id=user.id, attempt=attempt)
                return Ok(user)

            tries_left = self.max_attempts - attempt
            logger.info("Wrong password", user_id=user.id, tries_left=tries_left)
            if tries_left:
                noun = "try" if tries_left == 1 else "tries"
                self.output.print_error(f"Wrong password. {tries_left} {noun} left.")

        return Err(AuthErr.AllTriesExhausted)
