"""Resource handlers for the Aptos MCP server.

This module provides the functions behind the aptos://docs resources
registered with FastMCP.
"""

import logging
from typing import Any, Dict, List

from ..constants import Category
from ..errors import UnknownCategoryError
from .store import ResourceStore

logger = logging.getLogger(__name__)


async def list_document_resources(store: ResourceStore) -> List[Dict[str, Any]]:
    """List every document as an MCP resource entry.

    Args:
        store: Resource store to scan

    Returns:
        List of resource dictionaries in MCP format
    """
    resources = [info.to_resource_dict() for info in store.list_resources()]
    logger.debug(f"Listed {len(resources)} document resources")
    return resources


async def read_document_resource(store: ResourceStore, category: str, name: str) -> str:
    """Read one document by category and name.

    Args:
        store: Resource store
        category: Category directory name
        name: Document identifier (filename without .md)

    Returns:
        Document content

    Raises:
        ResourceNotFoundError: If the category or document does not exist
    """
    try:
        category_enum = Category(category)
    except ValueError:
        raise UnknownCategoryError(category, name) from None

    content = store.load(category_enum, name)
    logger.debug(f"Read document resource: {category}/{name}")
    return content
