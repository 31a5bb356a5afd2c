"""Shared fixtures: index record builders and an in-memory index."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from constants import Constants
from errors import RequestError
from registry.client import index_url
from registry.index_path import get_index_path

DATA_DIR = Path(__file__).parent / "data"

_CONFIG_ATTRS = ("INDEX_URL", "REQUEST_TIMEOUT", "USER_AGENT")


def make_dep(name, req, *, package=None, kind="normal", optional=False, features=None):
    """Build one dependency entry in index wire format."""
    return {
        "name": name,
        "req": req,
        "features": features or [],
        "optional": optional,
        "default_features": True,
        "target": None,
        "kind": kind,
        "registry": None,
        "package": package,
    }


def make_record(name, vers, deps=(), *, yanked=False, features=None, **extra):
    """Build one release line in index wire format."""
    record = {
        "name": name,
        "vers": vers,
        "deps": list(deps),
        "cksum": "0" * 64,
        "features": features or {},
        "yanked": yanked,
    }
    record.update(extra)
    return record


class FakeIndex:
    """In-memory index served through a patched ``registry.get_text``."""

    def __init__(self):
        self.files = {}
        self.mock = None

    def add(self, *records, base=None):
        """Append release records to their packages' index files."""
        for record in records:
            url = index_url(base or Constants.INDEX_URL, get_index_path(record["name"]))
            lines = self.files.setdefault(url, [])
            lines.append(json.dumps(record))
        return self

    def get_text(self, url, *, context, **kwargs):
        if url not in self.files:
            raise RequestError(url, "status code 404", 404)
        return "\n".join(self.files[url]) + "\n"

    @property
    def requested_urls(self):
        return [c.args[0] for c in self.mock.call_args_list]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep Constants and config discovery independent of the host machine."""
    for attr in _CONFIG_ATTRS:
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))
    for var in (Constants.ENV_CONFIG, Constants.ENV_INDEX_URL,
                Constants.ENV_REQUEST_TIMEOUT, Constants.ENV_LOG_LEVEL):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_index():
    index = FakeIndex()
    with patch("registry.get_text", side_effect=index.get_text) as mock:
        index.mock = mock
        yield index


@pytest.fixture
def libc_index():
    return (DATA_DIR / "libc.index").read_text(encoding="utf-8")
