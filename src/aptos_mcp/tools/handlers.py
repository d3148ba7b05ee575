"""Tool handlers for the Aptos MCP server.

The dispatcher validates tool parameters, calls the resource store and the
context matcher, and passes the result through the response composer.
Every handler returns plain text.
"""

import logging
from typing import Any, Callable

from ..config import ServerConfig
from ..constants import (
    Category,
    DeploymentTarget,
    DevelopmentContext,
    ImplementationArea,
    OperationKind,
)
from ..decorators import handle_errors
from ..errors import ResourceNotFoundError
from ..resources.matcher import ContextMatcher, MultipleMatches, NoMatch, SingleMatch
from ..resources.store import ResourceStore
from .checklists import debug_guidance, deployment_checklist, validation_checklist
from .guidance import compose
from .schemas import get_tool_schema

logger = logging.getLogger(__name__)

# Category sets aggregated by the build_* tools, in output order
SMART_CONTRACT_CATEGORIES = (Category.MANAGEMENT, Category.MOVE)
FRONTEND_CATEGORIES = (Category.FRONTEND,)
DAPP_CATEGORIES = (Category.FRONTEND, Category.MOVE, Category.MANAGEMENT)


def _validate(tool_name: str, **params: Any) -> None:
    schema = get_tool_schema(tool_name)
    if schema is None:
        raise KeyError(f"No schema for tool '{tool_name}'")
    schema.validate(params)


class ToolDispatcher:
    """Implements the MCP tools on top of the resource store."""

    def __init__(self, config: ServerConfig, store: ResourceStore):
        self.config = config
        self.store = store
        self.matcher = ContextMatcher(store, Category.HOW_TO)

    def handlers(self) -> dict[str, Callable]:
        """Map of tool names to handler coroutines."""
        return {
            "get_mcp_version": self.get_mcp_version,
            "build_smart_contract_on_aptos": self.build_smart_contract_on_aptos,
            "build_ui_frontend_on_aptos": self.build_ui_frontend_on_aptos,
            "build_dapp_on_aptos": self.build_dapp_on_aptos,
            "debug_aptos_issue": self.debug_aptos_issue,
            "validate_current_implementation": self.validate_current_implementation,
            "pre_deployment_checklist": self.pre_deployment_checklist,
            "list_aptos_resources": self.list_aptos_resources,
            "get_specific_aptos_resource": self.get_specific_aptos_resource,
            "get_aptos_resources": self.get_aptos_resources,
        }

    def _how_to_listing(self) -> list[str]:
        return self.store.list_identifiers(Category.HOW_TO)

    def _not_found(self, identifier: str) -> str:
        available = self._how_to_listing()
        return f"Resource '{identifier}' not found. Available resources:\n" + "\n".join(available)

    @handle_errors
    async def get_mcp_version(self) -> str:
        """Return the server version."""
        return self.config.version

    @handle_errors
    async def build_smart_contract_on_aptos(self) -> str:
        """Return all management and move documents."""
        logger.info("build_smart_contract_on_aptos called")
        content = self.store.aggregate(SMART_CONTRACT_CATEGORIES)
        return compose(content, OperationKind.BUILD_SMART_CONTRACT)

    @handle_errors
    async def build_ui_frontend_on_aptos(self) -> str:
        """Return all frontend documents."""
        logger.info("build_ui_frontend_on_aptos called")
        content = self.store.aggregate(FRONTEND_CATEGORIES)
        return compose(content, OperationKind.BUILD_FRONTEND)

    @handle_errors
    async def build_dapp_on_aptos(self) -> str:
        """Return all frontend, move and management documents."""
        logger.info("build_dapp_on_aptos called")
        content = self.store.aggregate(DAPP_CATEGORIES)
        return compose(content, OperationKind.BUILD_DAPP)

    @handle_errors
    async def debug_aptos_issue(
        self,
        issue_description: str,
        context: str,
        current_code: str | None = None,
        error_message: str | None = None,
    ) -> str:
        """Targeted guidance for a development problem.

        Args:
            issue_description: The problem or goal
            context: DevelopmentContext value
            current_code: Relevant code snippet (optional)
            error_message: Exact error message (optional)
        """
        _validate(
            "debug_aptos_issue",
            issue_description=issue_description,
            context=context,
            current_code=current_code,
            error_message=error_message,
        )
        logger.info(f"debug_aptos_issue called (context={context})")
        return debug_guidance(issue_description, DevelopmentContext(context), error_message)

    @handle_errors
    async def validate_current_implementation(
        self,
        implementation_area: str,
        specific_concern: str | None = None,
        current_approach: str | None = None,
    ) -> str:
        """Validation checklist for an implementation area."""
        _validate(
            "validate_current_implementation",
            implementation_area=implementation_area,
            specific_concern=specific_concern,
            current_approach=current_approach,
        )
        logger.info(f"validate_current_implementation called (area={implementation_area})")
        return validation_checklist(
            ImplementationArea(implementation_area),
            specific_concern=specific_concern,
            current_approach=current_approach,
        )

    @handle_errors
    async def pre_deployment_checklist(self, deployment_target: str) -> str:
        """Deployment checklist for testnet or mainnet."""
        _validate("pre_deployment_checklist", deployment_target=deployment_target)
        logger.info(f"pre_deployment_checklist called (target={deployment_target})")
        return deployment_checklist(DeploymentTarget(deployment_target))

    @handle_errors
    async def list_aptos_resources(self) -> str:
        """List the how_to documents."""
        listing = "\n".join(f"- {identifier}" for identifier in self._how_to_listing())
        text = (
            f"Available Aptos development resources:\n{listing}\n\n"
            "Use get_specific_aptos_resource with the exact filename to retrieve content."
        )
        return compose(text, OperationKind.LIST_RESOURCES)

    @handle_errors
    async def get_specific_aptos_resource(self, filename: str) -> str:
        """Return one how_to document, or the listing if it does not exist.

        Args:
            filename: Exact identifier (without .md extension)
        """
        _validate("get_specific_aptos_resource", filename=filename)
        logger.info(f"get_specific_aptos_resource called (filename={filename})")
        try:
            content = self.store.load(Category.HOW_TO, filename)
        except ResourceNotFoundError:
            return self._not_found(filename)
        return compose(content, OperationKind.SPECIFIC_RESOURCE)

    @handle_errors
    async def get_aptos_resources(
        self,
        context: str | None = None,
        specific_resource: str | None = None,
    ) -> str:
        """Resolve guidance by exact name or by free-text context.

        An exact name wins over the context. Without either, returns an
        overview of the available resources.

        Args:
            context: What the developer is trying to accomplish (optional)
            specific_resource: Exact identifier (optional)
        """
        _validate(
            "get_aptos_resources",
            context=context,
            specific_resource=specific_resource,
        )
        logger.info(
            f"get_aptos_resources called "
            f"(context={context!r}, specific_resource={specific_resource!r})"
        )

        if specific_resource:
            try:
                content = self.store.load(Category.HOW_TO, specific_resource)
            except ResourceNotFoundError:
                return self._not_found(specific_resource)
            return compose(content, OperationKind.SPECIFIC_RESOURCE_BY_NAME)

        if context is None:
            listing = "\n".join(self._how_to_listing())
            return compose(
                f"Available Aptos development resources:\n{listing}",
                OperationKind.OVERVIEW,
            )

        result = self.matcher.match(context)

        if isinstance(result, NoMatch):
            listing = "\n".join(self._how_to_listing())
            return compose(
                f'No direct matches found for "{context}". Available resources:\n{listing}',
                OperationKind.NO_MATCH,
            )

        if isinstance(result, SingleMatch):
            content = self.store.load(Category.HOW_TO, result.identifier)
            return compose(content, OperationKind.AUTO_SELECTED, context=context)

        if isinstance(result, MultipleMatches):
            listing = "\n".join(f"- {identifier}" for identifier in result.identifiers)
            return compose(
                f'📚 Multiple relevant resources found for "{context}":\n\n{listing}',
                OperationKind.MULTIPLE_MATCHES,
            )

        raise TypeError(f"Unhandled match result: {result!r}")
