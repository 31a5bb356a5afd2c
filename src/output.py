"""Rendering resolved releases for the console."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from constants import Constants, OutputMode
from errors import SerializeError
from registry.models import Release


def dependency_names(release: Release) -> List[str]:
    return [dep.name for dep in release.dependencies]


def feature_names(release: Release) -> List[str]:
    return list(release.all_features())


def _dumps(data: Any, pretty: bool) -> str:
    try:
        return json.dumps(data, indent=Constants.JSON_INDENT if pretty else None)
    except (TypeError, ValueError) as exc:
        raise SerializeError(str(exc)) from exc


def _names(release: Release, mode: OutputMode) -> List[str]:
    if mode == OutputMode.DEPS:
        return dependency_names(release)
    return feature_names(release)


def render(
    releases: Sequence[Release],
    mode: OutputMode = OutputMode.RECORD,
    *,
    as_json: bool = False,
    pretty: bool = False,
    delimiter: str = Constants.DEFAULT_DELIMITER,
) -> str:
    """Render releases as text.

    Args:
        releases: Resolved releases in output order.
        mode: Full records, dependency names or feature names.
        as_json: Emit a single JSON document. Full records become an object
            for one release and an array otherwise; name lists become an
            array for one release and an object keyed by ``name@version``
            otherwise. A release listed more than once gets a single key.
        pretty: Indent JSON output.
        delimiter: Separator between names in plain list output.

    Returns:
        str: The rendered text without a trailing newline.
    """
    if mode == OutputMode.RECORD:
        if as_json:
            records = [release.to_dict() for release in releases]
            return _dumps(records[0] if len(records) == 1 else records, pretty)
        return "\n".join(release.as_json_string(pretty=pretty) for release in releases)

    if as_json:
        if len(releases) == 1:
            return _dumps(_names(releases[0], mode), pretty)
        keyed: Dict[str, List[str]] = {}
        for release in releases:
            keyed.setdefault(str(release), _names(release, mode))
        return _dumps(keyed, pretty)
    return "\n".join(delimiter.join(_names(release, mode)) for release in releases)
