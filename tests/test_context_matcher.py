"""Tests for context matching against how_to documents."""

import pytest

from src.aptos_mcp.constants import Category
from src.aptos_mcp.resources.matcher import (
    KEYWORD_GROUPS,
    ContextMatcher,
    KeywordGroup,
    MultipleMatches,
    NoMatch,
    SingleMatch,
)
from src.aptos_mcp.resources.store import ResourceStore

from conftest import HOW_TO_DOCS


@pytest.fixture
def matcher(docs_root):
    return ContextMatcher(ResourceStore(docs_root), Category.HOW_TO)


@pytest.mark.unit
class TestKeywordGroups:
    """Test keyword group selection."""

    def test_group_order(self):
        assert [group.name for group in KEYWORD_GROUPS] == [
            "wallet",
            "gas",
            "indexer",
            "api",
            "transaction",
            "fungible_asset",
        ]

    def test_select_group_case_insensitive(self, matcher):
        assert matcher.select_group("Connect a WALLET").name == "wallet"

    def test_first_group_wins(self, matcher):
        # Both wallet and gas trigger; declaration order decides
        assert matcher.select_group("wallet gas fee issue").name == "wallet"

    def test_secondary_trigger(self, matcher):
        assert matcher.select_group("hitting the rate limit").name == "api"
        assert matcher.select_group("how do I sign").name == "transaction"

    def test_no_group(self, matcher):
        assert matcher.select_group("deploy my module") is None

    def test_group_accepts_any_filter(self):
        group = KeywordGroup("test", ("x",), ("alpha", "beta"))
        assert group.accepts("has_BETA_inside")
        assert not group.accepts("gamma")


@pytest.mark.unit
class TestMatch:
    """Test match results."""

    def test_wallet_single_match(self, matcher):
        result = matcher.match("wallet connection")
        assert result == SingleMatch("how_to_add_wallet_connection")

    def test_transaction_single_match(self, matcher):
        result = matcher.match("Transaction failed")
        assert result == SingleMatch("how_to_sign_and_submit_transaction")

    def test_empty_query_returns_everything(self, matcher):
        result = matcher.match("")
        assert isinstance(result, MultipleMatches)
        assert result.identifiers == tuple(sorted(HOW_TO_DOCS))

    def test_unknown_topic_no_match(self, matcher):
        assert matcher.match("zzz-nonexistent-topic") == NoMatch()

    def test_triggered_group_without_documents(self, matcher):
        assert matcher.match("gas station") == NoMatch()

    def test_substring_fallback(self, matcher):
        assert matcher.select_group("Submit") is None
        result = matcher.match("Submit")
        assert result == SingleMatch("how_to_sign_and_submit_transaction")

        result = matcher.match("how_to")
        assert isinstance(result, MultipleMatches)
        assert len(result.identifiers) == len(HOW_TO_DOCS)

    def test_multiple_matches_in_discovery_order(self, docs_root, matcher):
        (docs_root / "how_to" / "how_to_integrate_wallet_selector_ui.md").write_text("# Selector\n")

        result = matcher.match("wallet")

        assert result == MultipleMatches(
            ("how_to_add_wallet_connection", "how_to_integrate_wallet_selector_ui")
        )

    def test_missing_category_no_match(self, docs_root):
        matcher = ContextMatcher(ResourceStore(docs_root), Category.MANAGEMENT)
        assert matcher.match("") == NoMatch()
