"""Base service class with common functionality."""
from typing import TypeVar, Generic, Optional, List
from pydantic import BaseModel, ConfigDict

from grocerystore.domain.errors import InventoryError
from grocerystore.utils.logger import get_logger

# Generic type for service results
T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    suggestions: List[str] = []
    metadata: dict = {}

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, data: T, **metadata) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(
        cls,
        error: str,
        suggestions: Optional[List[str]] = None,
        **metadata
    ) -> 'Result[T]':
        """Create a failed result."""
        return cls(
            success=False,
            error=error or "Unknown error",
            suggestions=suggestions or [],
            metadata=metadata
        )

    @classmethod
    def from_error(cls, error: InventoryError) -> 'Result[T]':
        """Create a failed result from an InventoryError."""
        return cls.fail(error.message, error.suggestions, **error.metadata)


class BaseService:
    """Base class for all services."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(f"{action}: {status}", **kwargs)
