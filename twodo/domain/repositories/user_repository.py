"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from twodo.core.exceptions import StoreError
from twodo.core.result import Result
from twodo.domain.models.user import User
from twodo.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_id_by_username(self, username: str) -> Result[int, StoreError]:
        """Get the ID of the user with this username."""
        ...

    def delete_by_username(self, username: str) -> Result[None, StoreError]:
        """Delete the user with this username."""
        ...
