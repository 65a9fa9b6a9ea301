"""
Base repository with standardized CRUD operations and error translation.

Provides the foundation for the student, room and allocation
repositories. SQLAlchemy errors never escape a repository: they are
converted into application exceptions.
"""

from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hostel_allocation.config.logging import get_logger
from hostel_allocation.core.exceptions import DuplicateEntryError, handle_database_exception
from hostel_allocation.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one mapped table.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Convert SQLAlchemy failures into application exceptions."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"{operation} on {self.table_name} failed: {e}")
            raise handle_database_exception(e, operation, self.table_name) from e

    # ==================== Read Operations ====================

    def get_by_id(self, entity_id: Any, for_update: bool = False) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Args:
            entity_id: Primary key value
            for_update: Lock the row for the rest of the transaction
                (ignored by backends without row locks, e.g. SQLite)

        Returns:
            Entity or None
        """
        stmt = select(self.model).where(self.model.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        with self._translate_errors("get_by_id"):
            return self.db.execute(stmt).scalar_one_or_none()

    def get_all(self) -> List[ModelType]:
        """Return every row in creation order."""
        stmt = select(self.model).order_by(self.model.id)
        with self._translate_errors("get_all"):
            return list(self.db.execute(stmt).scalars().all())

    def find_one_by(self, **filters: Any) -> Optional[ModelType]:
        """Return the first row matching all equality filters."""
        stmt = select(self.model).filter_by(**filters).limit(1)
        with self._translate_errors("find_one_by"):
            return self.db.execute(stmt).scalar_one_or_none()

    def count(self) -> int:
        """Total number of rows."""
        stmt = select(func.count()).select_from(self.model)
        with self._translate_errors("count"):
            return self.db.execute(stmt).scalar_one()

    # ==================== Write Operations ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Persist a new entity.

        Args:
            entity: Entity to create
            commit: Commit immediately; otherwise only flush so the
                caller's transaction decides

        Returns:
            Created entity with its generated id

        Raises:
            DuplicateEntryError: If a unique constraint is violated
        """
        try:
            self.db.add(entity)
            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()

            logger.info(f"Created {self.model.__name__} with id: {entity.id}")
            return entity

        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                f"{self.model.__name__} already exists",
                table=self.table_name,
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise handle_database_exception(e, "create", self.table_name) from e
