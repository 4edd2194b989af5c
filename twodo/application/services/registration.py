"""Registration service — the signup flow."""

import structlog

from twodo.application.ports import InputProvider, OutputSink
from twodo.application.services.credentials import CredentialHasher
from twodo.application.services.validation import validate_password, validate_username
from twodo.core.exceptions import AuthErr
from twodo.core.result import Err, Ok, Result
from twodo.domain.models.user import Role, User
from twodo.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class RegistrationFlow:
    """Collects, validates and persists a new user's credentials."""

    def __init__(
        self,
        store: UserRepository,
        input_provider: InputProvider,
        output: OutputSink,
        hasher: CredentialHasher,
    ):
        self.store = store
        self.input = input_provider
        self.output = output
        self.hasher = hasher

    def signup(self) -> Result[User, AuthErr]:
        """Prompt for a username and password and register them as a USER."""
        username = self.input.read_line("Username: ").strip()
        checked = validate_username(username, self.store)
        if checked.is_err():
            return checked

        password = self.input.read_secret("Password: ")
        checked = validate_password(password)
        if checked.is_err():
            return checked

        return self._persist(username, password, Role.USER)

    def register(self, username: str, password: str, role: Role = Role.USER) -> Result[User, AuthErr]:
        """Register a user without prompting; same rules as signup."""
        checked = validate_username(username, self.store)
        if checked.is_err():
            return checked

        checked = validate_password(password)
        if checked.is_err():
            return checked

        return self._persist(username, password, role)

    def _persist(self, username: str, password: str, role: Role) -> Result[User, AuthErr]:
        user = User(username=username, role=role, password=self.hasher.hash(password))

        if self.store.add(user).is_err():
            logger.error("User registration failed", username=username)
            return Err(AuthErr.StoreError)

        logger.info("User registered", user_id=user.id, username=username, role=role.value)
        return Ok(user)
