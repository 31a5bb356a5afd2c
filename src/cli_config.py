"""CLI configuration overrides for runtime tunables.

Extracted from cratequery.py to keep the entrypoint slim. Precedence, lowest
to highest: Constants defaults, YAML config file, environment, CLI flags.
"""

from __future__ import annotations

import logging

from constants import Constants, _load_yaml_config

logger = logging.getLogger(__name__)


def apply_overrides(args) -> None:
    """Load file/env configuration, then apply CLI flags on top.

    The alternate index (``--index``) is not stored here; it travels with
    each query instead.
    """
    _load_yaml_config(getattr(args, "CONFIG", None))

    timeout = getattr(args, "TIMEOUT", None)
    if timeout is not None:
        if timeout <= 0:
            logger.warning("Ignoring non-positive --timeout %s", timeout)
        else:
            Constants.REQUEST_TIMEOUT = timeout

    logger.debug(
        "Effective configuration: index=%s timeout=%ss",
        getattr(args, "INDEX_URL", None) or Constants.INDEX_URL,
        Constants.REQUEST_TIMEOUT,
    )
