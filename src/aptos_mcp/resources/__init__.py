"""Document resources for the Aptos MCP server.

This package provides discovery and loading of the instructional documents
and the context matching used to pick the relevant ones.
"""

from .store import (
    ResourceInfo,
    ResourceStore,
    extract_title_from_content,
    no_content_found,
)
from .matcher import (
    KEYWORD_GROUPS,
    ContextMatcher,
    KeywordGroup,
    MatchResult,
    MultipleMatches,
    NoMatch,
    SingleMatch,
)

__all__ = [
    "ResourceInfo",
    "ResourceStore",
    "extract_title_from_content",
    "no_content_found",
    "KEYWORD_GROUPS",
    "ContextMatcher",
    "KeywordGroup",
    "MatchResult",
    "MultipleMatches",
    "NoMatch",
    "SingleMatch",
]
