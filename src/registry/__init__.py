"""Registry index package.

- index_path.py: package name -> index file path
- models.py: Release / Dependency records and their wire format
- package.py: index file parsing and the per-package release catalog
- client.py: HTTP fetch of index files

Public API is re-exported at ``registry``.
"""

# Patch point exposed for tests (e.g., patch("registry.get_text"))
from common.http_client import get_text  # noqa: F401

from .index_path import get_index_path  # noqa: F401
from .models import Dependency, Features, Release  # noqa: F401
from .package import Package  # noqa: F401
from .client import fetch_index, index_url  # noqa: F401

__all__ = [
    "get_index_path",
    "Dependency",
    "Features",
    "Release",
    "Package",
    "fetch_index",
    "index_url",
    # Patch points for tests
    "get_text",
]
