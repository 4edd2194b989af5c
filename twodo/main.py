"""2DO console application — main entry point."""

import sys

import structlog

from twodo.application.ports import InputProvider, OutputSink
from twodo.application.services.authentication import AuthenticationFlow
from twodo.application.services.credentials import CredentialHasher, PasslibHasher
from twodo.application.services.registration import RegistrationFlow
from twodo.config import Settings, load_settings
from twodo.core.error_log import log_to_file
from twodo.core.exceptions import AppError, AuthErr
from twodo.core.logging import configure_logging
from twodo.core.result import Err, Ok, Result
from twodo.domain.models.user import Role, User
from twodo.domain.repositories.user_repository import UserRepository
from twodo.infrastructure.database import make_engine
from twodo.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from twodo.interfaces.console import ConsoleInput, ConsolePrinter

logger = structlog.get_logger(__name__)

MENU_OPTIONS = ("Sign up", "Log in", "Exit")


class App:
    """Main menu wired to the signup and login flows."""

    def __init__(
        self,
        settings: Settings,
        store: UserRepository,
        input_provider: InputProvider,
        output: OutputSink,
        hasher: CredentialHasher,
    ):
        self.settings = settings
        self.store = store
        self.input = input_provider
        self.output = output
        self.registration = RegistrationFlow(store, input_provider, output, hasher)
        self.authentication = AuthenticationFlow(
            store, input_provider, output, hasher, settings.MAX_LOGIN_ATTEMPTS
        )

    def seed_default_admin(self) -> None:
        """Create the configured administrator when the users table is empty."""
        username = self.settings.DEFAULT_ADMIN_USERNAME
        password = self.settings.DEFAULT_ADMIN_PASSWORD
        if not username or not password or not self.store.is_empty():
            return

        match self.registration.register(username, password, role=Role.ADMIN):
            case Ok(admin):
                logger.info("Default admin user created", username=admin.username)
            case Err(error):
                logger.warning("Default admin user not created", reason=error.name)

    def run(self) -> None:
        self.seed_default_admin()

        while True:
            self.output.print_menu(self.settings.APP_NAME, MENU_OPTIONS)
            try:
                choice = self.input.read_line("> ").strip()
                if choice == "1":
                    self._report(self.registration.signup(), "Account created. Welcome, {}!")
                elif choice == "2":
                    self._report(self.authentication.login(), "Welcome back, {}!")
                elif choice == "3":
                    return
                else:
                    self.output.print_error("Invalid option.")
            except EOFError:
                return

    def _report(self, result: Result[User, AuthErr], greeting: str) -> None:
        match result:
            case Ok(user):
                self.output.print(greeting.format(user.username))
            case Err(error):
                self.output.print_error(error.message)


def report_fatal(exc: AppError, settings: Settings | None, output: OutputSink) -> None:
    """Append a fatal error to the error log and show it to the user."""
    # Invalid settings fall back to the field defaults
    log_file = settings.ERROR_LOG_FILE if settings else Settings.model_fields["ERROR_LOG_FILE"].default
    timezone = settings.TIMEZONE if settings else Settings.model_fields["TIMEZONE"].default

    message = f"{exc.message}: {exc.details}" if exc.details else exc.message
    log_to_file(message, log_file, timezone)
    logger.error("Fatal error", error=exc.message, details=exc.details)
    output.print_error(exc.message)


def main() -> int:
    output = ConsolePrinter()
    settings: Settings | None = None

    try:
        settings = load_settings()
        configure_logging(settings)
        engine = make_engine(settings.DATABASE_URL)
        with SQLAlchemyUserRepository(engine) as store:
            App(settings, store, ConsoleInput(), output, PasslibHasher(settings.PASSWORD_SCHEMES)).run()
    except AppError as exc:
        report_fatal(exc, settings, output)
        return 1
    except KeyboardInterrupt:
        output.print("")

    return 0


if __name__ == "__main__":
    sys.exit(main())
