"""Token parsing utilities for package queries."""

from typing import Optional, Tuple

from errors import InvalidQueryError

from .models import VersionReq


def tokenize_first_at(s: str) -> Tuple[str, Optional[str]]:
    """Return (name, requirement text or None) split on the first ``@``.

    An empty suffix counts as no requirement. Nothing is stripped, so
    callers trim input themselves.
    """
    name, _, spec = s.partition("@")
    if not spec:
        return name, None
    return name, spec


def parse_cli_token(token: str) -> Tuple[str, Optional[VersionReq]]:
    """Parse a ``name[@requirement]`` token.

    Raises:
        InvalidQueryError: If the name part is empty.
        InvalidVersionError: If the requirement part is malformed.
    """
    name, spec = tokenize_first_at(token)
    if not name:
        raise InvalidQueryError(token)
    if spec is None:
        return name, None
    return name, VersionReq.parse(spec)
