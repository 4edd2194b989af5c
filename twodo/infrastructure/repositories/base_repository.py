"""
SQLAlchemy implementation of the Base Repository.

Each repository owns one connection for its whole lifetime. Expected failures
come back as Err(StoreError); an unusable connection raises StoreUnavailableError.
"""

from typing import Any, Generic, List, Optional, TypeVar, Union

import structlog
from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from twodo.core.exceptions import StoreError, StoreUnavailableError
from twodo.core.result import Err, Ok, Result
from twodo.domain.repositories.base import BaseRepository, RowMapper

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class SQLAlchemyRepository(BaseRepository[T], Generic[T]):
    """Generic repository over a single table and a row mapper."""

    def __init__(self, engine: Engine, table: Table, mapper: RowMapper[T], unique_column: str):
        self.table = table
        self.mapper = mapper
        self.primary_key = next(iter(table.primary_key.columns))
        self.unique_column = table.c[unique_column]

        try:
            self.connection: Optional[Connection] = engine.connect()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(
                "Could not connect to the database",
                details={"url": engine.url.render_as_string(hide_password=True), "error": str(exc)},
            ) from exc

    # Ownership

    @property
    def conn(self) -> Connection:
        if self.connection is None:
            raise StoreUnavailableError("Repository is closed", details={"table": self.table.name})
        return self.connection

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()
            self.connection = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} owns a live connection and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} owns a live connection and cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} owns a live connection and cannot be pickled")

    # Statement helpers, one transaction each

    def _fetch_all(self, stmt) -> List[Any]:
        with self.conn.begin():
            return list(self.conn.execute(stmt).mappings())

    def _fetch_one(self, stmt) -> Optional[Any]:
        with self.conn.begin():
            return self.conn.execute(stmt).mappings().first()

    def _write(self, stmt) -> int:
        with self.conn.begin():
            return self.conn.execute(stmt).rowcount

    # CRUD

    def get_by_id(self, id: int) -> Result[T, StoreError]:
        try:
            row = self._fetch_one(select(self.table).where(self.primary_key == id))
        except SQLAlchemyError as exc:
            logger.error("Select by id failed", table=self.table.name, id=id, error=str(exc))
            return Err(StoreError.SelectFailure)

        if row is None:
            return Err(StoreError.SelectFailure)
        return Ok(self.mapper.from_row(row))

    def get_all(self) -> Result[List[T], StoreError]:
        try:
            rows = self._fetch_all(select(self.table))
        except SQLAlchemyError as exc:
            logger.error("Select all failed", table=self.table.name, error=str(exc))
            return Err(StoreError.SelectFailure)

        return Ok([self.mapper.from_row(row) for row in rows])

    def add(self, entity: T) -> Result[None, StoreError]:
        values = self.mapper.to_row(entity)

        # Insert and identity retrieval share one transaction
        try:
            trans = self.conn.begin()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(
                "Could not start a transaction", details={"table": self.table.name, "error": str(exc)}
            ) from exc

        try:
            result = self.conn.execute(insert(self.table).values(**values))
        except SQLAlchemyError as exc:
            trans.rollback()
            logger.error("Insert failed", table=self.table.name, error=str(exc))
            return Err(StoreError.InsertFailure)

        identity = result.inserted_primary_key
        if not identity or identity[0] is None:
            trans.rollback()
            logger.error("Generated identity unavailable", table=self.table.name)
            return Err(StoreError.SelectFailure)

        try:
            trans.commit()
        except SQLAlchemyError as exc:
            trans.rollback()
            logger.error("Insert commit failed", table=self.table.name, error=str(exc))
            return Err(StoreError.InsertFailure)

        entity.id = identity[0]
        logger.debug("Row inserted", table=self.table.name, id=entity.id)
        return Ok(None)

    def update(self, entity: T) -> Result[None, StoreError]:
        if entity.id is None:
            logger.warning("Update of an unpersisted entity", table=self.table.name)
            return Err(StoreError.UpdateFailure)

        stmt = (
            update(self.table)
            .where(self.primary_key == entity.id)
            .values(**self.mapper.to_row(entity))
        )
        try:
            affected = self._write(stmt)
        except SQLAlchemyError as exc:
            logger.error("Update failed", table=self.table.name, id=entity.id, error=str(exc))
            return Err(StoreError.UpdateFailure)

        if affected == 0:
            logger.warning("Update matched no rows", table=self.table.name, id=entity.id)
        return Ok(None)

    def delete(self, id_or_entity: Union[int, T]) -> Result[None, StoreError]:
        id = id_or_entity if isinstance(id_or_entity, int) else id_or_entity.id
        if id is None:
            logger.warning("Delete of an unpersisted entity", table=self.table.name)
            return Err(StoreError.DeleteFailure)

        try:
            affected = self._write(delete(self.table).where(self.primary_key == id))
        except SQLAlchemyError as exc:
            logger.error("Delete failed", table=self.table.name, id=id, error=str(exc))
            return Err(StoreError.DeleteFailure)

        if affected == 0:
            logger.warning("Delete matched no rows", table=self.table.name, id=id)
        return Ok(None)

    def find_by_unique_column(self, value: Any) -> Result[T, StoreError]:
        try:
            row = self._fetch_one(select(self.table).where(self.unique_column == value))
        except SQLAlchemyError as exc:
            logger.error(
                "Select by unique column failed",
                table=self.table.name,
                column=self.unique_column.name,
                error=str(exc),
            )
            return Err(StoreError.SelectFailure)

        if row is None:
            return Err(StoreError.SelectFailure)
        return Ok(self.mapper.from_row(row))

    def is_empty(self) -> bool:
        try:
            with self.conn.begin():
                count = self.conn.execute(select(func.count()).select_from(self.table)).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(
                "Could not count rows", details={"table": self.table.name, "error": str(exc)}
            ) from exc
        return count == 0
