"""Error taxonomy for remote inventory operations and the single error slot."""

from __future__ import annotations

from typing import Optional


class InventoryError(Exception):
    """Base error carrying a human-readable message and the transport failure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class FetchError(InventoryError):
    """Loading the collection from the remote service failed."""


class UpdateError(InventoryError):
    """Replacing an item on the remote service failed."""


class DeleteError(InventoryError):
    """Deleting an item on the remote service failed."""


class ErrorState:
    """Holds at most one pending error. The last recorded error wins.

    The slot is never cleared implicitly; callers reset it with :meth:`clear`.
    """

    def __init__(self) -> None:
        self._error: Optional[InventoryError] = None

    def record(self, error: InventoryError) -> None:
        self._error = error

    def clear(self) -> None:
        self._error = None

    @property
    def current(self) -> Optional[InventoryError]:
        return self._error

    @property
    def message(self) -> Optional[str]:
        return self._error.message if self._error is not None else None

    def __bool__(self) -> bool:
        return self._error is not None
