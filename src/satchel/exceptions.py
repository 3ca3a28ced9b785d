class SatchelError(Exception):
    """Base exception for the satchel inventory engine."""


class ShapeError(SatchelError):
    """Raised when a shape matrix is empty, ragged or holds non-binary cells."""


class ItemDataError(SatchelError):
    """Raised when raw item data fails schema validation."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class LayoutConfigError(SatchelError):
    """Raised when a grid layout configuration is unusable."""
