"""Domain errors raised by the catalog storage layer."""


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class InvalidOperationError(CatalogError):
    """Raised when the storage layer cannot perform an operation in its current state."""


class InvalidCarDataError(CatalogError, ValueError):
    """Raised when a listing is rejected by the storage layer (e.g. duplicate ID)."""
