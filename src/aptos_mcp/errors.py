"""Exceptions raised by the Aptos MCP server."""

from typing import Optional, Sequence

from .constants import Category, ErrorCode, ErrorMessage


class AptosMCPError(Exception):
    """Base class for server errors."""

    error_code: ErrorCode = ErrorCode.UNEXPECTED_ERROR


class ResourceNotFoundError(AptosMCPError, LookupError):
    """Requested identifier is absent from its category."""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, category: Optional[Category], identifier: str, available: Sequence[str] = ()):
        self.category = category
        self.identifier = identifier
        self.available = list(available)
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{ErrorMessage.RESOURCE_NOT_FOUND}: '{self.identifier}' in {self.category.value}"


class UnknownCategoryError(ResourceNotFoundError):
    """Requested category is not one of the document categories."""

    def __init__(self, category: str, identifier: str):
        self.category_name = category
        super().__init__(None, identifier, [c.value for c in Category])

    def _describe(self) -> str:
        return (
            f"{ErrorMessage.UNKNOWN_CATEGORY}: '{self.category_name}' "
            f"(requested '{self.identifier}')"
        )


class InvalidParametersError(AptosMCPError, ValueError):
    """Tool parameters failed schema validation."""

    error_code = ErrorCode.INVALID_PARAMETERS

    def __init__(self, tool_name: str, problems: Sequence[str]):
        self.tool_name = tool_name
        self.problems = list(problems)
        super().__init__(f"Invalid parameters for '{tool_name}': {'; '.join(self.problems)}")
