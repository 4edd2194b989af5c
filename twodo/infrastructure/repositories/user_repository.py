"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, Mapping

import structlog
from sqlalchemy import Column, Integer, String, Table, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from twodo.core.exceptions import StoreError, StoreUnavailableError
from twodo.core.result import Err, Ok, Result
from twodo.domain.models.user import USERNAME_MAX_LENGTH, User, role_to_string, string_to_role
from twodo.domain.repositories.user_repository import UserRepository
from twodo.infrastructure.database import metadata
from twodo.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)

users_table = Table(
    "users",
    metadata,
    Column("user_id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(USERNAME_MAX_LENGTH), nullable=False),
    Column("role", String(5), nullable=False),  # "User" or "Admin"
    Column("password", String(255), nullable=False),
)


class UserRowMapper:
    """Maps User entities to rows of the users table."""

    def to_row(self, user: User) -> dict:
        return {
            "username": user.username,
            "role": role_to_string(user.role),
            "password": user.password,
        }

    def from_row(self, row: Mapping[str, Any]) -> User:
        return User(
            id=row["user_id"],
            username=row["username"],
            role=string_to_role(row["role"]),
            password=row["password"],
        )


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def __init__(self, engine: Engine):
        super().__init__(engine, users_table, UserRowMapper(), unique_column="username")
        self.create_table()

    def create_table(self) -> None:
        """Create the users table if it does not exist yet."""
        try:
            with self.conn.begin():
                metadata.create_all(self.conn, tables=[self.table], checkfirst=True)
        except SQLAlchemyError as exc:
            self.close()
            raise StoreUnavailableError(
                "Failure creating user table", details={"error": str(exc)}
            ) from exc

    def get_id_by_username(self, username: str) -> Result[int, StoreError]:
        try:
            row = self._fetch_one(select(self.primary_key).where(self.unique_column == username))
        except SQLAlchemyError as exc:
            logger.error("Select user id failed", username=username, error=str(exc))
            return Err(StoreError.SelectFailure)

        if row is None:
            return Err(StoreError.SelectFailure)
        return Ok(row["user_id"])

    def delete_by_username(self, username: str) -> Result[None, StoreError]:
        match self.get_id_by_username(username):
            case Ok(user_id):
                return self.delete(user_id)
            case Err(_):
                return Err(StoreError.DeleteFailure)
