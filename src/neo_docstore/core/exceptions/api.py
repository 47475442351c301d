"""Controller outcome signals.

Controllers raise these instead of formatting responses; the HTTP layer that
mounts the controllers decides how each one is rendered.
"""

from .base import DocstoreError


class ApiError(DocstoreError):
    """Base class for controller outcome signals."""
    pass


class BadRequestError(ApiError):
    """Raised when request parameters cannot be bound."""
    pass


class ResourceNotFoundError(ApiError):
    """Raised when a service call produced no entity."""
    pass


class CreationFailedError(BadRequestError):
    """Raised when a create call produced an empty result."""
    pass
