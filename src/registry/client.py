"""Registry index client: fetch raw index files over HTTP."""
from __future__ import annotations

import logging

from common.logging_utils import extra_context, safe_url

import registry as registry_pkg

logger = logging.getLogger(__name__)


def index_url(base_url: str, path: str) -> str:
    """Join an index base URL and an index path with a single ``/``."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def fetch_index(base_url: str, path: str) -> str:
    """Fetch one index file and return its body.

    Args:
        base_url: Index root, e.g. ``https://index.crates.io``.
        path: Path produced by ``get_index_path``.

    Raises:
        RequestError: Transport failure or non-2xx status.
        IndexIoError: The body could not be read.
    """
    url = index_url(base_url, path)
    logger.debug(
        "Fetching index file",
        extra=extra_context(
            event="fetch",
            component="client",
            action="GET",
            target=safe_url(url),
        ),
    )
    return registry_pkg.get_text(url, context="index")
