"""Package query: ``name[@requirement]`` plus the index to ask."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

from constants import Constants
from registry.client import fetch_index
from registry.index_path import get_index_path
from registry.models import Release
from registry.package import Package

from .models import VersionReq
from .parser import parse_cli_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    """A parsed package query.

    ``index_location`` overrides the configured index root for this query
    only; build it with ``with_alternate_index`` to keep the original intact.
    """
    name: str
    version_req: Optional[VersionReq] = None
    index_location: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "Query":
        """Parse ``name`` or ``name@requirement``.

        Raises:
            InvalidQueryError: If the name is empty.
            InvalidVersionError: If the requirement is malformed.
        """
        name, version_req = parse_cli_token(text)
        return cls(name=name, version_req=version_req)

    def with_alternate_index(self, location: str) -> "Query":
        return dataclasses.replace(self, index_location=location)

    @property
    def effective_index_url(self) -> str:
        return self.index_location or Constants.INDEX_URL

    def fetch_raw(self) -> str:
        """Download this package's index file."""
        return fetch_index(self.effective_index_url, get_index_path(self.name))

    def resolve_package(self) -> Package:
        return Package.from_index_file(self.fetch_raw())

    def resolve_release(self) -> Optional[Release]:
        """Pick the release this query asks for.

        Returns the highest release matching the requirement, or the latest
        release when there is none. None means nothing matched.
        """
        package = self.resolve_package()
        if self.version_req is not None:
            release = package.matching(self.version_req)
        else:
            release = package.latest()
        logger.debug("Query %s resolved to %s", self, release)
        return release

    def __str__(self) -> str:
        if self.version_req is None:
            return self.name
        return f"{self.name}@{self.version_req}"
