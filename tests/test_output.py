"""Tests for console rendering."""

import json

from conftest import make_dep, make_record
from constants import OutputMode
from output import dependency_names, feature_names, render
from registry.models import Release


def _releases():
    return [
        Release.from_dict(make_record(
            "app", "1.0.0",
            [make_dep("serde", "^1"), make_dep("log", "0.4", kind="dev")],
            features={"default": ["std"], "std": []},
        )),
        Release.from_dict(make_record("serde", "1.0.190", features={"derive": []})),
    ]


class TestRenderRecords:
    """Full records as JSON."""

    def test_json_lines_by_default(self):
        lines = render(_releases()).splitlines()
        assert [json.loads(line)["name"] for line in lines] == ["app", "serde"]

    def test_single_release_json_object(self):
        data = json.loads(render(_releases()[:1], as_json=True))
        assert data["name"] == "app"
        assert data["vers"] == "1.0.0"

    def test_many_releases_json_array(self):
        data = json.loads(render(_releases(), as_json=True, pretty=True))
        assert [d["vers"] for d in data] == ["1.0.0", "1.0.190"]


class TestRenderNames:
    """Dependency and feature name lists."""

    def test_dependency_names(self):
        assert dependency_names(_releases()[0]) == ["serde", "log"]

    def test_feature_names_sorted(self):
        assert feature_names(_releases()[0]) == ["default", "std"]

    def test_delimited_deps(self):
        assert render(_releases()[:1], OutputMode.DEPS, delimiter=",") == "serde,log"

    def test_one_line_per_release(self):
        text = render(_releases(), OutputMode.FEATURES, delimiter=" ")
        assert text == "default std\nderive"

    def test_json_names_single(self):
        assert json.loads(render(_releases()[:1], OutputMode.DEPS, as_json=True)) == ["serde", "log"]

    def test_json_names_many_keyed_by_release(self):
        data = json.loads(render(_releases(), OutputMode.FEATURES, as_json=True))
        assert data == {"app@1.0.0": ["default", "std"], "serde@1.0.190": ["derive"]}

    def test_json_names_repeated_release_keyed_once(self):
        app, serde = _releases()
        data = json.loads(render([app, serde, app], OutputMode.DEPS, as_json=True))
        assert data == {"app@1.0.0": ["serde", "log"], "serde@1.0.190": []}
        assert list(data) == ["app@1.0.0", "serde@1.0.190"]
