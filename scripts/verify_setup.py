#!/usr/bin/env python3
"""Script to verify development environment setup and the documents tree."""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def check_python_version():
    """Check Python version >= 3.10."""
    version = sys.version_info
    if version.major >= 3 and version.minor >= 10:
        print(f"✓ Python {version.major}.{version.minor}.{version.micro}")
        return True
    print(f"✗ Python {version.major}.{version.minor}.{version.micro} (need 3.10+)")
    return False


def check_package(package_name):
    """Check if a package is installed."""
    try:
        __import__(package_name)
        print(f"✓ {package_name} installed")
        return True
    except ImportError:
        print(f"✗ {package_name} not installed")
        return False


def check_file(path):
    """Check if file exists."""
    if (PROJECT_ROOT / path).exists():
        print(f"✓ {path} exists")
        return True
    print(f"✗ {path} missing")
    return False


def check_documents():
    """Check that every category has at least one loadable document."""
    from src.aptos_mcp.config import load_config
    from src.aptos_mcp.constants import Category
    from src.aptos_mcp.resources.store import ResourceStore

    config = load_config()
    store = ResourceStore(config.docs_path)
    print(f"Documents root: {config.docs_path}")

    results = []
    for category in Category:
        identifiers = store.list_identifiers(category)
        if identifiers:
            print(f"✓ {category.value}: {len(identifiers)} documents")
        else:
            print(f"✗ {category.value}: no documents")
        results.append(bool(identifiers))
    return results


def main():
    """Run all verification checks."""
    print("=" * 60)
    print("aptos-mcp Environment Verification")
    print("=" * 60)
    print()

    checks = []

    print("Checking Python version...")
    checks.append(check_python_version())
    print()

    print("Checking required packages...")
    for package in ["mcp", "yaml", "dotenv"]:
        checks.append(check_package(package))
    print()

    print("Checking development packages...")
    for package in ["pytest", "pytest_asyncio"]:
        checks.append(check_package(package))
    print()

    print("Checking configuration files...")
    for config_file in ["pyproject.toml", "config/server.yaml"]:
        checks.append(check_file(config_file))
    print()

    if all(checks[1:4]):
        print("Checking documents...")
        checks.extend(check_documents())
        print()

    print("=" * 60)
    passed = sum(checks)
    total = len(checks)
    print(f"Results: {passed}/{total} checks passed")
    print("=" * 60)

    if passed == total:
        print("✓ All checks passed! Environment is ready.")
        return 0
    print("✗ Some checks failed. Please review the output above.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
