"""Exceptions raised while querying and resolving index data."""

from typing import Optional


class CrateQueryError(Exception):
    """Base class for every error raised by cratequery."""


class InvalidVersionError(CrateQueryError, ValueError):
    """A version or version requirement could not be parsed."""

    def __init__(self, value: str, reason: str = ""):
        self.value = value
        message = f"failed parsing version: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RequestError(CrateQueryError):
    """The HTTP request for an index file failed."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"request failed: {url}: {reason}")


class IndexIoError(CrateQueryError):
    """The response body could not be read."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"IO error: {url}: {reason}")


class DeserializeError(CrateQueryError):
    """An index line is not a valid release record."""

    def __init__(self, reason: str, line: Optional[int] = None):
        self.reason = reason
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"failed to deserialize{where}: {reason}")


class SerializeError(CrateQueryError):
    """A release could not be encoded to JSON."""

    def __init__(self, reason: str):
        super().__init__(f"failed to serialize: {reason}")


class EmptyIndexError(CrateQueryError):
    """The index file contained no release lines."""

    def __init__(self):
        super().__init__("failed to populate from index file: empty")


class NotFoundError(CrateQueryError):
    """No release matched the requested package spec."""

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(f"package `{spec}` not found")


class InvalidQueryError(CrateQueryError, ValueError):
    """A package spec has no package name."""

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(f"invalid package spec {spec!r}: missing package name")
