"""Context matching for the Aptos MCP server.

Maps a free-text description of what the developer is doing to the
documents of a category, using ordered keyword groups.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..constants import Category
from .store import ResourceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordGroup:
    """Query triggers and the identifier filter they select."""

    name: str
    triggers: Tuple[str, ...]
    filters: Tuple[str, ...]

    def triggered_by(self, query: str) -> bool:
        return any(trigger in query for trigger in self.triggers)

    def accepts(self, identifier: str) -> bool:
        identifier = identifier.lower()
        return any(term in identifier for term in self.filters)


# Evaluated in order; the first triggered group decides the filter.
# A query such as "wallet gas fee" therefore resolves to the wallet group.
KEYWORD_GROUPS: Tuple[KeywordGroup, ...] = (
    KeywordGroup("wallet", ("wallet",), ("wallet",)),
    KeywordGroup("gas", ("gas",), ("gas",)),
    KeywordGroup("indexer", ("indexer",), ("indexer",)),
    KeywordGroup("api", ("api", "rate"), ("api", "rate")),
    KeywordGroup("transaction", ("transaction", "sign"), ("transaction", "sign")),
    KeywordGroup("fungible_asset", ("fungible", "asset"), ("fungible", "asset")),
)


@dataclass(frozen=True)
class NoMatch:
    """No identifier matched the query."""


@dataclass(frozen=True)
class SingleMatch:
    """Exactly one identifier matched."""

    identifier: str


@dataclass(frozen=True)
class MultipleMatches:
    """Several identifiers matched, in discovery order."""

    identifiers: Tuple[str, ...]


MatchResult = Union[NoMatch, SingleMatch, MultipleMatches]


class ContextMatcher:
    """Resolve context queries against the documents of one category."""

    def __init__(
        self,
        store: ResourceStore,
        category: Category = Category.HOW_TO,
        groups: Tuple[KeywordGroup, ...] = KEYWORD_GROUPS,
    ):
        self.store = store
        self.category = category
        self.groups = groups

    def select_group(self, query: str) -> Optional[KeywordGroup]:
        """Return the first keyword group triggered by the query, if any."""
        query = query.lower()
        for group in self.groups:
            if group.triggered_by(query):
                return group
        return None

    def candidates(self, query: str) -> list[str]:
        """Identifiers accepted for the query, in discovery order."""
        normalized = query.lower()
        identifiers = self.store.list_identifiers(self.category)
        group = self.select_group(normalized)

        if group is not None:
            logger.debug(f"Context '{query}' selected keyword group '{group.name}'")
            return [identifier for identifier in identifiers if group.accepts(identifier)]

        return [identifier for identifier in identifiers if normalized in identifier.lower()]

    def match(self, query: str) -> MatchResult:
        """Match a context query.

        An empty query matches every identifier.

        Args:
            query: Free-text context

        Returns:
            NoMatch, SingleMatch or MultipleMatches
        """
        matches = self.candidates(query)
        logger.info(f"Context '{query}' matched {len(matches)} {self.category.value} documents")

        if not matches:
            return NoMatch()
        if len(matches) == 1:
            return SingleMatch(matches[0])
        return MultipleMatches(tuple(matches))
