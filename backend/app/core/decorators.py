"""
Service layer decorators for common functionality.

This module provides decorators for error handling, logging, and other
cross-cutting concerns in the service layer.
"""

import functools
import inspect
import structlog
from typing import Any, Awaitable, Callable, Dict, Type, ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import (
    BadRequestError,
    DatabaseError,
    ServiceException,
)

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")


def _build_context(
    service_name: str,
    operation_name: str,
    bound_arguments: Dict[str, Any],
    include_context: bool,
) -> Dict[str, Any]:
    context: Dict[str, Any] = {
        "service": service_name,
        "operation": operation_name,
    }
    if not include_context:
        return context

    # Add method parameters to context (excluding self and database sessions)
    for name, value in bound_arguments.items():
        if name in ["self", "db", "session"]:
            continue
        # Limit string values to avoid huge log entries
        if isinstance(value, str) and len(value) > 100:
            context[name] = value[:100] + "..."
        else:
            context[name] = str(value)[:200] if value is not None else None
    return context


def service_error_handler(
    service_name: str,
    include_context: bool = True,
    default_error_type: Type[ServiceException] = ServiceException,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator for handling service method errors with structured logging.

    Service exceptions pass through unchanged so their error kind reaches the
    HTTP layer intact. Anything else is logged and re-raised wrapped in a
    service exception.

    :param service_name: Name of the service (e.g., "PlayerService")
    :param include_context: Whether to include method parameters in error context
    :param default_error_type: Exception type used to wrap unexpected errors
    :returns: Decorated coroutine function with error handling

    :example:
        @service_error_handler("PlayerService")
        async def get_player(self, player_id: int) -> PlayerORM:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        operation_name = func.__name__
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound_args = signature.bind(*args, **kwargs)
            bound_args.apply_defaults()
            context = _build_context(
                service_name, operation_name, bound_args.arguments, include_context
            )

            try:
                logger.debug("Service method called", **context)
                result = await func(*args, **kwargs)
                logger.debug("Service method completed successfully", **context)
                return result

            except ServiceException as e:
                # Expected outcome (bad input, missing record): log and re-raise
                logger.info(
                    "Service operation rejected",
                    error_type=e.__class__.__name__,
                    error_kind=e.kind.value,
                    error_message=e.message,
                    error_context=e.context,
                    **context,
                )
                raise

            except ValueError as e:
                logger.warning(
                    "Validation error in service operation",
                    error_message=str(e),
                    **context,
                )
                raise BadRequestError(
                    message=str(e),
                    service=service_name,
                    operation=operation_name,
                    context=context if include_context else {},
                ) from e

            except SQLAlchemyError as e:
                logger.error(
                    "Database error in service operation",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    **context,
                )
                raise DatabaseError(
                    message=str(e),
                    service=service_name,
                    operation=operation_name,
                    context=context if include_context else {},
                    original_error=e,
                ) from e

            except Exception as e:
                logger.error(
                    "Unexpected error in service operation",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    **context,
                )
                raise default_error_type(
                    message=f"Unexpected error in {service_name}.{operation_name}: {str(e)}",
                    service=service_name,
                    operation=operation_name,
                    context=context if include_context else {},
                    original_error=e,
                ) from e

        if not inspect.iscoroutinefunction(func):
            raise TypeError(
                f"service_error_handler expects a coroutine function, got {func!r}"
            )
        return async_wrapper

    return decorator
