"""Pytest configuration and shared fixtures."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Make the src package importable
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ.setdefault("TESTING", "true")

HOW_TO_DOCS = {
    "how_to_add_wallet_connection": "# Add a wallet connection\n\nUse the wallet adapter.\n",
    "how_to_sign_and_submit_transaction": "# Sign and submit\n\nCall signAndSubmitTransaction.\n",
    "how_to_integrate_fungible_asset": "# Fungible assets\n\nUse primary stores.\n",
}

FRONTEND_DOCS = {
    "a_setup": "# Frontend setup\n\nInstall the SDK.\n",
    "b_reading": "# Reading data\n\nUse view functions.\n",
}

MOVE_DOCS = {
    "move_basics": "# Move basics\n\nModules and resources.\n",
}


@pytest.fixture
def docs_root():
    """Documents tree with how_to, frontend and move; management is missing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "docs"
        for category, docs in (
            ("how_to", HOW_TO_DOCS),
            ("frontend", FRONTEND_DOCS),
            ("move", MOVE_DOCS),
        ):
            directory = root / category
            directory.mkdir(parents=True)
            for identifier, content in docs.items():
                (directory / f"{identifier}.md").write_text(content, encoding="utf-8")

        # Not documents
        (root / "how_to" / "notes.txt").write_text("ignored")
        (root / "frontend" / "images").mkdir()

        yield root
