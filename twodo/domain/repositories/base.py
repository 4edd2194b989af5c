"""
Base Repository Interface.
Defines the standard contract for data access operations and row mapping.
"""

from typing import Any, List, Mapping, Protocol, TypeVar, Union

from twodo.core.exceptions import StoreError
from twodo.core.result import Result

T = TypeVar("T")


class RowMapper(Protocol[T]):
    """Converts between an entity and a table row."""

    def to_row(self, entity: T) -> dict:
        """Column values for insert/update, without the primary key."""
        ...

    def from_row(self, row: Mapping[str, Any]) -> T:
        """Build an entity from a fetched row."""
        ...


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Result[T, StoreError]:
        """Get a single entity by ID."""
        ...

    def get_all(self) -> Result[List[T], StoreError]:
        """List all entities in storage order."""
        ...

    def add(self, entity: T) -> Result[None, StoreError]:
        """Insert an entity and assign its generated ID."""
        ...

    def update(self, entity: T) -> Result[None, StoreError]:
        """Overwrite the row matching the entity's ID."""
        ...

    def delete(self, id_or_entity: Union[int, T]) -> Result[None, StoreError]:
        """Delete an entity by ID."""
        ...

    def find_by_unique_column(self, value: Any) -> Result[T, StoreError]:
        """Get the entity whose unique column equals value."""
        ...

    def is_empty(self) -> bool:
        """Whether the table holds no rows."""
        ...
