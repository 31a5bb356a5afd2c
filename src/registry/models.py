"""Release and dependency records as stored in the registry index.

Each index line is one JSON object using the registry's short keys
(``vers``, ``deps``, ``cksum`` ...). The dataclasses below expose
descriptive attribute names and convert back to the wire keys on output.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import semantic_version

from errors import DeserializeError, InvalidVersionError, SerializeError
from versioning.models import VersionReq, parse_version

Features = Dict[str, List[str]]

_MISSING = object()


def _field(record: Dict[str, Any], key: str, kind, *, required: bool = True, default: Any = None):
    """Fetch ``key`` from ``record`` and check its JSON type.

    Optional fields that are absent or null yield ``default``.
    """
    value = record.get(key, _MISSING)
    if value is _MISSING or value is None:
        if required:
            raise DeserializeError(f"missing field `{key}`")
        return default
    # bool is a subclass of int; only accept it where bool was asked for
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DeserializeError(f"invalid type for field `{key}`: {type(value).__name__}")
    return value


def _string_list(value: List[Any], key: str) -> List[str]:
    if not all(isinstance(item, str) for item in value):
        raise DeserializeError(f"invalid type for field `{key}`: expected a list of strings")
    return list(value)


def _features(value: Optional[Dict[str, Any]], key: str) -> Optional[Features]:
    if value is None:
        return None
    features: Features = {}
    for name, members in value.items():
        if not isinstance(members, list):
            raise DeserializeError(f"invalid type for field `{key}.{name}`: expected a list")
        features[name] = _string_list(members, f"{key}.{name}")
    return features


def _version_req(text: str, key: str) -> VersionReq:
    try:
        return VersionReq.parse(text)
    except InvalidVersionError as exc:
        raise DeserializeError(f"invalid field `{key}`: {exc}") from exc


@dataclass(frozen=True)
class Dependency:
    """One dependency declared by a release."""
    name: str
    version_req: VersionReq
    features: List[str] = field(default_factory=list)
    optional: bool = False
    default_features: bool = True
    target: Optional[str] = None
    kind: Optional[str] = None
    registry: Optional[str] = None
    renamed_package: Optional[str] = None

    @property
    def effective_name(self) -> str:
        """Name to look up in the index; differs from ``name`` for renamed deps."""
        return self.renamed_package or self.name

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Dependency":
        if not isinstance(record, dict):
            raise DeserializeError("dependency entry is not an object")
        return cls(
            name=_field(record, "name", str),
            version_req=_version_req(_field(record, "req", str), "req"),
            features=_string_list(_field(record, "features", list), "features"),
            optional=_field(record, "optional", bool),
            default_features=_field(record, "default_features", bool),
            target=_field(record, "target", str, required=False),
            kind=_field(record, "kind", str, required=False),
            registry=_field(record, "registry", str, required=False),
            renamed_package=_field(record, "package", str, required=False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "req": str(self.version_req),
            "features": list(self.features),
            "optional": self.optional,
            "default_features": self.default_features,
            "target": self.target,
            "kind": self.kind,
            "registry": self.registry,
            "package": self.renamed_package,
        }


@dataclass(frozen=True)
class Release:
    """A single published version of a package."""
    name: str
    version: semantic_version.Version
    dependencies: Tuple[Dependency, ...]
    checksum: str
    features: Features
    yanked: bool
    links: Optional[str] = None
    schema_version: int = 1
    features_extended: Optional[Features] = None
    min_rust_version: Optional[VersionReq] = None

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Release":
        """Build a Release from one decoded index line.

        Raises:
            DeserializeError: If a field is missing or has the wrong type.
        """
        if not isinstance(record, dict):
            raise DeserializeError("release entry is not an object")

        vers = _field(record, "vers", str)
        try:
            version = parse_version(vers)
        except InvalidVersionError as exc:
            raise DeserializeError(f"invalid field `vers`: {exc}") from exc

        rust_version = _field(record, "rust_version", str, required=False)
        return cls(
            name=_field(record, "name", str),
            version=version,
            dependencies=tuple(Dependency.from_dict(d) for d in _field(record, "deps", list)),
            checksum=_field(record, "cksum", str),
            features=_features(_field(record, "features", dict), "features"),
            yanked=_field(record, "yanked", bool),
            links=_field(record, "links", str, required=False),
            schema_version=_field(record, "v", int, required=False, default=1),
            features_extended=_features(
                _field(record, "features2", dict, required=False), "features2"
            ),
            min_rust_version=(
                _version_req(rust_version, "rust_version") if rust_version is not None else None
            ),
        )

    @classmethod
    def from_json(cls, line: str) -> "Release":
        try:
            record = json.loads(line)
        except json.JSONDecodeError as exc:
            raise DeserializeError(str(exc)) from exc
        return cls.from_dict(record)

    def all_features(self) -> Features:
        """Features from ``features`` and ``features2`` merged, sorted by name."""
        merged = dict(self.features)
        if self.features_extended:
            merged.update(self.features_extended)
        return {name: merged[name] for name in sorted(merged)}

    def to_dict(self) -> Dict[str, Any]:
        """Return the record in the registry's wire shape."""
        data: Dict[str, Any] = {
            "name": self.name,
            "vers": str(self.version),
            "deps": [dep.to_dict() for dep in self.dependencies],
            "cksum": self.checksum,
            "features": self.features,
            "yanked": self.yanked,
            "links": self.links,
            "v": self.schema_version,
            "features2": self.features_extended,
        }
        if self.min_rust_version is not None:
            data["rust_version"] = str(self.min_rust_version)
        return data

    def as_json_string(self, pretty: bool = False) -> str:
        try:
            return json.dumps(self.to_dict(), indent=2 if pretty else None)
        except (TypeError, ValueError) as exc:
            raise SerializeError(str(exc)) from exc

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"
