"""Version and version-requirement types backed by semantic_version."""

import re
from dataclasses import dataclass, field
from typing import Tuple

import semantic_version

from errors import InvalidVersionError

# Longest operators first so ">=" is not read as ">"
_OPERATORS = ("<=", ">=", "<", ">", "=", "^", "~")
_WILDCARD_VERSION = re.compile(r"^[0-9xX*]+(?:\.[0-9xX*]+){0,2}$")
_BASE_TRIPLE = re.compile(r"^(\d+)\.(\d+)\.(\d+)-")
_ZERO_PARTIAL = {"0": ">=0.0.0,<1.0.0", "0.0": ">=0.0.0,<0.1.0"}


def parse_version(text: str) -> semantic_version.Version:
    """Parse a strict semantic version such as ``0.1.12`` or ``1.0.0-rc.1``."""
    try:
        return semantic_version.Version(text)
    except (TypeError, ValueError) as exc:
        raise InvalidVersionError(str(text), str(exc)) from exc


def _normalize_comparator(term: str, raw: str) -> str:
    """Translate one Cargo comparator into SimpleSpec syntax.

    A bare version is a caret requirement and ``x``/``X`` wildcards become
    ``*``. Whitespace between the operator and the version is dropped.
    Partial all-zero carets (``^0``, ``^0.0``) expand to explicit ranges of
    two comma-joined comparators.
    """
    term = term.strip()
    if not term:
        raise InvalidVersionError(raw, "empty comparator")

    op = ""
    for candidate in _OPERATORS:
        if term.startswith(candidate):
            op = candidate
            break
    version = term[len(op):].strip()
    if not version:
        raise InvalidVersionError(raw, f"missing version after {op!r}")

    if _WILDCARD_VERSION.match(version):
        version = version.replace("x", "*").replace("X", "*")
    if not op:
        op = "" if "*" in version else "^"
    if op == "^" and version in _ZERO_PARTIAL:
        return _ZERO_PARTIAL[version]
    return f"{op}{version}"


@dataclass(frozen=True)
class VersionReq:
    """A Cargo-style version requirement, e.g. ``^0.1.0`` or ``>=1.2, <1.5``.

    Equality and hashing use the raw text so a requirement round-trips
    unchanged through the index wire format.
    """
    raw: str
    spec: semantic_version.SimpleSpec = field(compare=False, repr=False)
    prerelease_bases: Tuple[Tuple[int, int, int], ...] = field(
        default=(), compare=False, repr=False
    )

    @classmethod
    def parse(cls, text: str) -> "VersionReq":
        """Parse requirement text, raising InvalidVersionError when malformed."""
        if not isinstance(text, str):
            raise InvalidVersionError(repr(text), "requirement must be a string")
        comparators = [_normalize_comparator(term, text) for term in text.split(",")]

        bases = []
        for comparator in comparators:
            m = _BASE_TRIPLE.match(comparator.lstrip("<>=^~"))
            if m:
                bases.append((int(m.group(1)), int(m.group(2)), int(m.group(3))))

        try:
            spec = semantic_version.SimpleSpec(",".join(comparators))
        except ValueError as exc:
            raise InvalidVersionError(text, str(exc)) from exc
        return cls(raw=text, spec=spec, prerelease_bases=tuple(bases))

    def matches(self, version: semantic_version.Version) -> bool:
        """Return True if ``version`` satisfies this requirement.

        Pre-releases only match when a comparator names a pre-release of the
        same major.minor.patch.
        """
        if version.prerelease:
            base = (version.major, version.minor, version.patch)
            if base not in self.prerelease_bases:
                return False
        return self.spec.match(version)

    def __str__(self) -> str:
        return self.raw
