"""Tests for document discovery, loading and aggregation.

Tests cover:
- Identifier discovery and ordering
- Missing category directories
- Loading documents and not-found failures
- Multi-category aggregation and the no-content sentinel
- Resource metadata for MCP listing
"""

import logging

import pytest

from src.aptos_mcp.constants import Category
from src.aptos_mcp.errors import ResourceNotFoundError
from src.aptos_mcp.resources.store import (
    ResourceStore,
    extract_title_from_content,
    no_content_found,
)

from conftest import FRONTEND_DOCS, HOW_TO_DOCS, MOVE_DOCS


@pytest.mark.unit
class TestListIdentifiers:
    """Test identifier discovery."""

    def test_lists_markdown_stems_sorted(self, docs_root):
        store = ResourceStore(docs_root)
        identifiers = store.list_identifiers(Category.HOW_TO)

        assert identifiers == sorted(HOW_TO_DOCS)

    def test_ignores_other_files_and_directories(self, docs_root):
        store = ResourceStore(docs_root)

        assert "notes" not in store.list_identifiers(Category.HOW_TO)
        assert store.list_identifiers(Category.FRONTEND) == ["a_setup", "b_reading"]

    def test_no_duplicates(self, docs_root):
        store = ResourceStore(docs_root)
        for category in Category:
            identifiers = store.list_identifiers(category)
            assert len(identifiers) == len(set(identifiers))

    def test_extension_is_case_insensitive(self, docs_root):
        (docs_root / "move" / "UPPER.MD").write_text("# Upper\n")
        store = ResourceStore(docs_root)

        assert "UPPER" in store.list_identifiers(Category.MOVE)

    def test_same_stem_with_different_extension_case(self, docs_root, caplog):
        (docs_root / "move" / "move_basics.MD").write_text("# Upper variant\n")
        store = ResourceStore(docs_root)

        with caplog.at_level(logging.WARNING):
            identifiers = store.list_identifiers(Category.MOVE)

        assert identifiers.count("move_basics") == 1
        assert store.load(Category.MOVE, "move_basics") == MOVE_DOCS["move_basics"]
        assert "Duplicate document move/move_basics" in caplog.text

    def test_directory_named_like_document_ignored(self, docs_root):
        (docs_root / "move" / "folder.md").mkdir()
        store = ResourceStore(docs_root)

        assert "folder" not in store.list_identifiers(Category.MOVE)
        with pytest.raises(ResourceNotFoundError):
            store.load(Category.MOVE, "folder")

    def test_missing_directory_returns_empty_and_warns(self, docs_root, caplog):
        store = ResourceStore(docs_root)
        with caplog.at_level(logging.WARNING):
            identifiers = store.list_identifiers(Category.MANAGEMENT)

        assert identifiers == []
        assert "management" in caplog.text

    def test_sees_new_files_without_restart(self, docs_root):
        store = ResourceStore(docs_root)
        assert "new_doc" not in store.list_identifiers(Category.MOVE)

        (docs_root / "move" / "new_doc.md").write_text("# New\n")

        assert "new_doc" in store.list_identifiers(Category.MOVE)


@pytest.mark.unit
class TestLoad:
    """Test document loading."""

    def test_every_listed_identifier_loads(self, docs_root):
        store = ResourceStore(docs_root)
        for category in Category:
            for identifier in store.list_identifiers(category):
                assert store.load(category, identifier)

    def test_load_returns_full_text(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.load(Category.HOW_TO, "how_to_add_wallet_connection")

        assert content == HOW_TO_DOCS["how_to_add_wallet_connection"]

    def test_missing_identifier_raises_with_alternatives(self, docs_root):
        store = ResourceStore(docs_root)
        with pytest.raises(ResourceNotFoundError) as exc_info:
            store.load(Category.HOW_TO, "missing_id")

        assert exc_info.value.identifier == "missing_id"
        assert exc_info.value.category is Category.HOW_TO
        assert "how_to_add_wallet_connection" in exc_info.value.available

    def test_identifier_from_other_category_not_found(self, docs_root):
        store = ResourceStore(docs_root)
        with pytest.raises(ResourceNotFoundError):
            store.load(Category.FRONTEND, "move_basics")

    def test_path_traversal_not_found(self, docs_root):
        store = ResourceStore(docs_root)
        with pytest.raises(ResourceNotFoundError):
            store.load(Category.HOW_TO, "../move/move_basics")

    def test_missing_category_not_found(self, docs_root):
        store = ResourceStore(docs_root)
        with pytest.raises(ResourceNotFoundError):
            store.load(Category.MANAGEMENT, "anything")


@pytest.mark.unit
class TestAggregate:
    """Test multi-category aggregation."""

    def test_single_category_in_listing_order(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.aggregate([Category.FRONTEND])

        first = content.index(FRONTEND_DOCS["a_setup"])
        second = content.index(FRONTEND_DOCS["b_reading"])
        assert first < second

    def test_delimiter_names_source(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.aggregate([Category.FRONTEND])

        assert "frontend/a_setup" in content
        assert "frontend/b_reading" in content

    def test_empty_category_skipped(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.aggregate([Category.MANAGEMENT, Category.MOVE])

        assert MOVE_DOCS["move_basics"] in content
        assert "management" not in content

    def test_categories_kept_in_given_order(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.aggregate([Category.MOVE, Category.FRONTEND])

        assert content.index(MOVE_DOCS["move_basics"]) < content.index(FRONTEND_DOCS["a_setup"])

    def test_empty_input_returns_sentinel(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.aggregate([])

        assert content != ""
        assert content == no_content_found([])

    def test_all_empty_returns_sentinel(self, docs_root):
        store = ResourceStore(docs_root)
        content = store.aggregate([Category.MANAGEMENT])

        assert content == "No content found in management directory."

    def test_sentinel_lists_categories(self):
        sentinel = no_content_found([Category.MANAGEMENT, Category.MOVE])
        assert sentinel == "No content found in management, move directories."

    def test_undecodable_document_skipped(self, docs_root, caplog):
        (docs_root / "move" / "broken.md").write_bytes(b"\xff\xfe not utf-8")
        store = ResourceStore(docs_root)

        with caplog.at_level(logging.WARNING):
            text = store.aggregate([Category.MOVE])

        assert MOVE_DOCS["move_basics"] in text
        assert "move/broken" not in text
        assert "Skipping move/broken" in caplog.text


@pytest.mark.unit
class TestResourceInfo:
    """Test metadata used for MCP resource listing."""

    def test_extract_title_from_h1(self):
        assert extract_title_from_content("# My Title\n\nBody", "doc") == "My Title"

    def test_extract_title_from_identifier(self):
        assert extract_title_from_content("No heading", "how_to_do_it") == "How to do it"

    def test_describe(self, docs_root):
        store = ResourceStore(docs_root)
        info = store.describe(Category.MOVE, "move_basics")

        assert info.title == "Move basics"
        assert info.uri == "aptos://docs/move/move_basics"
        assert info.last_modified is not None

        resource = info.to_resource_dict()
        assert resource["mimeType"] == "text/markdown"
        assert resource["metadata"]["category"] == "move"

    def test_list_resources_covers_all_categories(self, docs_root):
        store = ResourceStore(docs_root)
        uris = {info.uri for info in store.list_resources()}

        assert len(uris) == len(HOW_TO_DOCS) + len(FRONTEND_DOCS) + len(MOVE_DOCS)
        assert "aptos://docs/how_to/how_to_add_wallet_connection" in uris

    def test_list_resources_skips_undecodable_document(self, docs_root):
        (docs_root / "move" / "broken.md").write_bytes(b"\xff\xfe not utf-8")
        store = ResourceStore(docs_root)

        uris = {info.uri for info in store.list_resources()}

        assert "aptos://docs/move/move_basics" in uris
        assert "aptos://docs/move/broken" not in uris
