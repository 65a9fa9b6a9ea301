"""
Base service class providing common functionality for all services.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel as PydanticModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostel_allocation.config.logging import get_logger
from hostel_allocation.core.exceptions import (
    BaseAppException,
    create_validation_error,
    field_errors_from,
    handle_database_exception,
)

TSchema = TypeVar("TSchema", bound=PydanticModel)


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Transaction management with rollback on failure
    - Payload validation against request schemas
    """

    def __init__(self, db_session: Session):
        self.db: Session = db_session
        self._logger = get_logger(f"hostel_allocation.services.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Context manager for database transactions with automatic rollback.

        Example:
            with self.transaction():
                self.rooms.increment_occupancy(room_id)
                self.allocations.create(allocation, commit=False)
        """
        try:
            yield self.db
            self._commit()
        except BaseAppException as e:
            self._rollback()
            self._logger.warning(f"Transaction rolled back: {e}")
            raise
        except Exception as e:
            self._rollback()
            self._logger.error(f"Transaction failed: {e}", exc_info=True)
            raise

    def _commit(self) -> None:
        """Commit the current transaction with error handling."""
        try:
            self.db.commit()
            self._logger.debug("Transaction committed successfully")
        except SQLAlchemyError as e:
            self._logger.error(f"Commit failed: {e}", exc_info=True)
            self._rollback()
            raise handle_database_exception(e, "commit") from e

    def _rollback(self) -> None:
        """Rollback the current transaction, suppressing rollback errors."""
        try:
            self.db.rollback()
            self._logger.debug("Transaction rolled back")
        except Exception as e:
            # never mask the exception being handled
            self._logger.warning(f"Rollback failed: {e}")

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _validate(
        self,
        schema: Type[TSchema],
        payload: Union[TSchema, Mapping[str, Any], None],
    ) -> TSchema:
        """
        Coerce a payload into ``schema``.

        Raises:
            ValidationError: If required fields are missing or malformed
        """
        if isinstance(payload, schema):
            return payload
        try:
            return schema.model_validate(dict(payload or {}))
        except PydanticValidationError as e:
            raise create_validation_error(field_errors_from(e.errors())) from e

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _log_operation(
        self,
        operation: str,
        entity_ref: Optional[Any] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log service operation with standardized format."""
        context = {"entity_ref": str(entity_ref) if entity_ref is not None else None}
        if extra:
            context.update(extra)

        self._logger.info(f"Operation: {operation}", extra=context)
