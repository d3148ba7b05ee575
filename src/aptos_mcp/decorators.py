"""Decorators for MCP tool handlers.

This module provides the boundary error handling shared by all tool
handlers: no exception crosses the tool boundary, every failure becomes
explanatory text that suggests a next action.
"""

import logging
from functools import wraps
from typing import Awaitable, Callable, ParamSpec

from .constants import ErrorCode, ErrorMessage
from .errors import InvalidParametersError, ResourceNotFoundError

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def format_error(error_code: ErrorCode, message: str, next_step: str) -> str:
    return f"❌ [{error_code.value}] {message}\n\n🔄 NEXT STEP: {next_step}"


def handle_errors(func: Callable[P, Awaitable[str]]) -> Callable[P, Awaitable[str]]:
    """Decorator to handle errors in async tool handlers.

    Args:
        func: Async handler function to wrap

    Returns:
        Wrapped function that returns explanatory text on exception
    """
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> str:
        try:
            return await func(*args, **kwargs)
        except InvalidParametersError as e:
            logger.warning(f"Invalid input in {func.__name__}: {e}")
            return format_error(
                e.error_code,
                str(e),
                "Check the tool's parameter schema and call it again with valid values.",
            )
        except ResourceNotFoundError as e:
            logger.warning(f"Resource lookup failed in {func.__name__}: {e}")
            available = "\n".join(e.available) or "(none)"
            return format_error(
                e.error_code,
                f"{e}. Available resources:\n{available}",
                "Use 'list_aptos_resources' and retry with one of the listed names.",
            )
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            return format_error(
                ErrorCode.UNEXPECTED_ERROR,
                f"{ErrorMessage.UNEXPECTED_ERROR}: {e}",
                "Use 'list_aptos_resources' to see what is available, or retry the call.",
            )

    return wrapper
