"""Package catalog built from one registry index file."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from errors import DeserializeError, EmptyIndexError
from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import VersionReq

from .index_path import get_index_path
from .models import Release

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Package:
    """All releases of one package, oldest first as listed in the index."""
    name: str
    index_path: str
    releases: Tuple[Release, ...]

    @classmethod
    def from_index_file(cls, content: str) -> "Package":
        """Parse newline-delimited index records.

        Blank lines are skipped. The package name is taken from the most
        recent (last) release.

        Raises:
            DeserializeError: If any line is not a valid release record.
            EmptyIndexError: If the file holds no release lines.
        """
        releases: List[Release] = []
        for lineno, line in enumerate(content.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                releases.append(Release.from_json(line))
            except DeserializeError as exc:
                raise DeserializeError(exc.reason, lineno) from exc

        if not releases:
            raise EmptyIndexError()

        name = releases[-1].name
        package = cls(name=name, index_path=get_index_path(name), releases=tuple(releases))
        if is_debug_enabled(logger):
            logger.debug(
                "Parsed index file",
                extra=extra_context(
                    event="parse",
                    component="package",
                    action="from_index_file",
                    outcome="success",
                    target=name,
                    count=len(releases),
                ),
            )
        return package

    def latest(self) -> Optional[Release]:
        """Most recently published release, or None for an empty catalog."""
        return self.releases[-1] if self.releases else None

    def matching(self, version_req: VersionReq) -> Optional[Release]:
        """Highest-listed release satisfying ``version_req``.

        Scans newest to oldest. Yanked releases are not skipped; callers
        inspect ``Release.yanked`` themselves.
        """
        for release in reversed(self.releases):
            if version_req.matches(release.version):
                return release
        return None

    def versions(self) -> List[str]:
        """Version strings in index order."""
        return [str(release.version) for release in self.releases]
