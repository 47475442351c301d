"""Standardized error handling decorators for repositories and services.

Domain errors (validation, not-found, deleted, already-exists) always pass
through untouched. Store failures are logged with their operation context and
re-raised as the wrapper kind requested by the decorated operation, keeping
the original exception as ``__cause__``.
"""

import functools
import logging
from typing import Any, Callable, Optional, Type

from ..core.exceptions import DocstoreError, ValidationError, RepositoryError

logger = logging.getLogger(__name__)


def _describe_call(operation_name: str, args: tuple, kwargs: dict, target: Any) -> str:
    context = {"operation": operation_name}
    collection = getattr(target, "collection_name", None)
    if collection:
        context["collection"] = collection
    if "document_id" in kwargs:
        context["id"] = kwargs["document_id"]
    elif args and isinstance(args[0], str):
        context["id"] = args[0]
    return ", ".join(f"{k}={v}" for k, v in context.items())


def repository_error_handler(
    operation_name: str,
    wrap_with: Type[DocstoreError] = RepositoryError,
    passthrough: Optional[tuple] = None,
):
    """Decorator for repository methods that talk to the document store.

    Args:
        operation_name: Human readable operation used in the wrapped message
        wrap_with: Exception kind raised for unexpected store failures
        passthrough: Extra exception types re-raised unchanged

    Usage:
        @repository_error_handler("create document", wrap_with=CreationError)
        async def create(self, data):
            ...
    """
    domain_errors = (ValidationError, RepositoryError) + tuple(passthrough or ())

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs) -> Any:
            try:
                return await func(self, *args, **kwargs)
            except domain_errors as e:
                logger.info(
                    f"Domain exception in {operation_name}: {e} | "
                    f"Context: {_describe_call(operation_name, args, kwargs, self)}"
                )
                raise
            except Exception as e:
                logger.error(
                    f"Failed to {operation_name}: {e} | "
                    f"Context: {_describe_call(operation_name, args, kwargs, self)}"
                )
                raise wrap_with(f"Failed to {operation_name}: {e}") from e

        return wrapper
    return decorator


def log_service_errors(operation_name: str):
    """Decorator that logs service failures and re-raises them unchanged."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs) -> Any:
            try:
                return await func(self, *args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error in {operation_name}: {e} | "
                    f"Context: {_describe_call(operation_name, args, kwargs, getattr(self, 'repository', self))}"
                )
                raise

        return wrapper
    return decorator
