"""Recursive dependency resolution over the registry index."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from errors import CrateQueryError, NotFoundError
from common.logging_utils import extra_context, is_debug_enabled
from registry.models import Release

from .models import VersionReq
from .query import Query

logger = logging.getLogger(__name__)


def _already_resolved(accumulated: List[Release], name: str, version_req: VersionReq) -> bool:
    """True if a release named ``name`` satisfying ``version_req`` was collected."""
    return any(
        release.name == name and version_req.matches(release.version)
        for release in accumulated
    )


class Resolver:
    """Resolve package specs, optionally following their dependencies.

    Releases are collected depth-first in visitation order: a root, then
    each of its dependencies in listed order, each followed by its own
    dependencies. A dependency already satisfied by a collected release is
    skipped, which also terminates cycles.

    Args:
        recursive: Follow dependencies of every resolved release.
        max_depth: Dependency hops allowed below each root; None is unlimited.
        ignore_missing: Drop specs that match nothing or fail to fetch
            instead of raising.
        index_location: Alternate index root used for every query.
    """

    def __init__(
        self,
        recursive: bool = False,
        max_depth: Optional[int] = None,
        ignore_missing: bool = False,
        index_location: Optional[str] = None,
    ):
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        self.recursive = recursive
        self.max_depth = max_depth
        self.ignore_missing = ignore_missing
        self.index_location = index_location

    def resolve(self, spec: str, accumulated: Optional[List[Release]] = None) -> List[Release]:
        """Resolve one root spec into ``accumulated`` and return it."""
        if accumulated is None:
            accumulated = []
        self._resolve(spec, self.max_depth, accumulated)
        return accumulated

    def resolve_all(self, specs: Iterable[str]) -> List[Release]:
        """Resolve several roots into one shared, ordered result."""
        accumulated: List[Release] = []
        for spec in specs:
            self.resolve(spec, accumulated)
        return accumulated

    def _query(self, spec: str) -> Query:
        query = Query.parse(spec)
        if self.index_location:
            query = query.with_alternate_index(self.index_location)
        return query

    def _resolve(self, spec: str, remaining_depth: Optional[int], accumulated: List[Release]) -> None:
        # remaining_depth None means unlimited and is never decremented
        query = self._query(spec)
        try:
            release = query.resolve_release()
        except CrateQueryError as exc:
            if not self.ignore_missing:
                raise
            logger.warning("Ignoring %s: %s", spec, exc)
            return
        if release is None:
            if not self.ignore_missing:
                raise NotFoundError(spec)
            logger.warning("No release of %s found, skipping", spec)
            return

        accumulated.append(release)
        if is_debug_enabled(logger):
            logger.debug(
                "Resolved release",
                extra=extra_context(
                    event="resolve",
                    component="resolver",
                    target=spec,
                    outcome=str(release.version),
                    remaining_depth=remaining_depth,
                ),
            )

        if not self.recursive:
            return
        if remaining_depth is not None and remaining_depth < 1:
            return
        next_depth = None if remaining_depth is None else remaining_depth - 1

        for dep in release.dependencies:
            name = dep.effective_name
            if _already_resolved(accumulated, name, dep.version_req):
                logger.debug("Skipping %s@%s, already resolved", name, dep.version_req)
                continue
            self._resolve(f"{name}@{dep.version_req}", next_depth, accumulated)
