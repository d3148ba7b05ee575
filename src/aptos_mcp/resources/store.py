"""Document store for the Aptos MCP server.

Documents live in one directory per category under the docs root. The store
keeps no index: every call scans the filesystem again so that edits on disk
are visible without a restart.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..constants import DOCUMENT_EXTENSION, RESOURCE_URI_PREFIX, Category
from ..errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


def no_content_found(categories: Iterable[Category]) -> str:
    """Sentinel returned by aggregate() when no category yields a document."""
    names = [category.value for category in categories]
    if not names:
        return "No content found."
    if len(names) == 1:
        return f"No content found in {names[0]} directory."
    return f"No content found in {', '.join(names)} directories."


def section_delimiter(category: Category, identifier: str) -> str:
    return f"\n\n---\n## {category.value}/{identifier}\n\n"


def extract_title_from_content(content: str, identifier: str) -> str:
    """Extract title from markdown content or identifier.

    Args:
        content: Markdown content
        identifier: Document identifier (filename without extension)

    Returns:
        Title string
    """
    h1_match = re.search(r"^#\s+(.+)$", content, re.MULTILINE)
    if h1_match:
        return h1_match.group(1).strip()

    return identifier.replace("-", " ").replace("_", " ").capitalize()


@dataclass(frozen=True)
class ResourceInfo:
    """Listing metadata for a single document."""

    category: Category
    identifier: str
    title: str
    last_modified: Optional[datetime] = None

    @property
    def uri(self) -> str:
        return f"{RESOURCE_URI_PREFIX}/{self.category.value}/{self.identifier}"

    def to_resource_dict(self) -> Dict[str, Any]:
        """Convert to MCP resource format."""
        return {
            "uri": self.uri,
            "name": self.identifier,
            "title": self.title,
            "mimeType": "text/markdown",
            "metadata": {
                "category": self.category.value,
                "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            },
        }


class ResourceStore:
    """Read-only access to categorized markdown documents."""

    def __init__(self, docs_path: Path):
        """Initialize the store.

        Args:
            docs_path: Root directory containing one subdirectory per category
        """
        self.docs_path = Path(docs_path)

    def category_path(self, category: Category) -> Path:
        return self.docs_path / category.value

    def _scan(self, category: Category) -> Dict[str, Path]:
        """Map identifiers to document files in a category.

        When two files share a stem (``x.md`` and ``x.MD``) the lowercase
        extension wins and the collision is logged.
        """
        directory = self.category_path(category)
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning(f"Cannot read {category.value} directory {directory}: {e}")
            return {}

        documents: Dict[str, Path] = {}
        for entry in entries:
            if entry.suffix.lower() != DOCUMENT_EXTENSION or not entry.is_file():
                continue
            existing = documents.get(entry.stem)
            if existing is not None:
                logger.warning(
                    f"Duplicate document {category.value}/{entry.stem}: "
                    f"{existing.name} and {entry.name}"
                )
                if existing.suffix == DOCUMENT_EXTENSION:
                    continue
            documents[entry.stem] = entry
        return documents

    def list_identifiers(self, category: Category) -> List[str]:
        """List document identifiers in a category.

        A missing or unreadable category directory yields an empty list and
        a warning rather than an error.

        Args:
            category: Category to scan

        Returns:
            Sorted identifiers (file stems of documents)
        """
        identifiers = sorted(self._scan(category))
        logger.debug(f"Discovered {len(identifiers)} documents in {category.value}")
        return identifiers

    def _document_path(self, category: Category, identifier: str) -> Path:
        documents = self._scan(category)
        if identifier not in documents:
            logger.debug(f"Document not found: {category.value}/{identifier}")
            raise ResourceNotFoundError(category, identifier, sorted(documents))
        return documents[identifier]

    def load(self, category: Category, identifier: str) -> str:
        """Load the full text of a document.

        Args:
            category: Category of the document
            identifier: Document identifier (filename without extension)

        Returns:
            Document content

        Raises:
            ResourceNotFoundError: If the identifier is not in the category
            UnicodeDecodeError: If the document is not valid UTF-8
        """
        path = self._document_path(category, identifier)
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def aggregate(self, categories: Iterable[Category]) -> str:
        """Concatenate every document of the given categories.

        Each document is preceded by a delimiter naming its category and
        identifier. Categories without documents are skipped, and so are
        documents that cannot be read or decoded.

        Args:
            categories: Ordered categories to include

        Returns:
            Combined content, or the no-content sentinel if nothing was found
        """
        categories = list(categories)
        sections: List[str] = []
        for category in categories:
            for identifier in self.list_identifiers(category):
                try:
                    content = self.load(category, identifier)
                except (ResourceNotFoundError, OSError, UnicodeDecodeError) as e:
                    logger.warning(f"Skipping {category.value}/{identifier}: {e}")
                    continue
                sections.append(section_delimiter(category, identifier) + content)

        if not sections:
            logger.info(
                f"No documents found in {[c.value for c in categories]}"
            )
            return no_content_found(categories)

        return "".join(sections).lstrip()

    def describe(self, category: Category, identifier: str) -> ResourceInfo:
        """Build listing metadata for a document.

        Raises:
            ResourceNotFoundError: If the identifier is not in the category
        """
        content = self.load(category, identifier)
        path = self._document_path(category, identifier)
        try:
            last_modified = datetime.fromtimestamp(path.stat().st_mtime)
        except OSError:
            last_modified = None

        return ResourceInfo(
            category=category,
            identifier=identifier,
            title=extract_title_from_content(content, identifier),
            last_modified=last_modified,
        )

    def list_resources(self) -> List[ResourceInfo]:
        """List metadata for every document in every category."""
        resources = []
        for category in Category:
            for identifier in self.list_identifiers(category):
                try:
                    resources.append(self.describe(category, identifier))
                except (ResourceNotFoundError, OSError, UnicodeDecodeError) as e:
                    logger.warning(f"Skipping {category.value}/{identifier}: {e}")
        return resources
