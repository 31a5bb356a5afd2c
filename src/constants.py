"""Constants used in the project."""

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    RESOLUTION_ERROR = 1
    CONNECTION_ERROR = 2
    NOT_FOUND = 3


class OutputMode(Enum):
    """What to print for every resolved release.

    Args:
        Enum (string): Output shapes supported by the CLI.
    """

    RECORD = "record"
    DEPS = "deps"
    FEATURES = "features"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERSION = "0.3.0"
    INDEX_URL = "https://index.crates.io"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    USER_AGENT = f"cratequery/{VERSION}"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    DEFAULT_DELIMITER = "\n"
    JSON_INDENT = 2

    ENV_CONFIG = "CRATEQUERY_CONFIG"
    ENV_INDEX_URL = "CRATEQUERY_INDEX_URL"
    ENV_REQUEST_TIMEOUT = "CRATEQUERY_REQUEST_TIMEOUT"
    ENV_LOG_LEVEL = "CRATEQUERY_LOG_LEVEL"
    CONFIG_FILE_NAMES = ["cratequery.yml", "cratequery.yaml"]
    USER_CONFIG_PATH = os.path.join("~", ".config", "cratequery", "config.yml")


# Keys accepted in the YAML config file and the Constants attribute they set
_CONFIG_KEYS = {
    "index_url": ("INDEX_URL", str),
    "request_timeout": ("REQUEST_TIMEOUT", int),
    "user_agent": ("USER_AGENT", str),
}


def _find_config_file():
    """Return the first existing config path, or None."""
    explicit = os.environ.get(Constants.ENV_CONFIG)
    if explicit:
        return explicit
    for name in Constants.CONFIG_FILE_NAMES:
        if os.path.isfile(name):
            return name
    user_path = os.path.expanduser(Constants.USER_CONFIG_PATH)
    if os.path.isfile(user_path):
        return user_path
    return None


def _apply_config(cfg):
    """Copy recognized keys from a mapping onto Constants."""
    for key, (attr, cast) in _CONFIG_KEYS.items():
        if cfg.get(key) is None:
            continue
        try:
            setattr(Constants, attr, cast(cfg[key]))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid config value for %s: %r", key, cfg[key])


def _load_yaml_config(path=None):
    """Load YAML config and environment overrides into Constants.

    Never raises: unreadable or malformed config is logged and skipped.

    Args:
        path (str, optional): Explicit config path. Defaults to discovery.

    Returns:
        dict: The mapping that was read from the file (empty if none).
    """
    import yaml  # pylint: disable=import-outside-toplevel

    cfg = {}
    path = path or _find_config_file()
    if path:
        try:
            with open(path, encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            if isinstance(data, dict):
                cfg = data
            else:
                logger.warning("Config file %s is not a mapping, ignoring", path)
        except FileNotFoundError:
            logger.warning("Config file not found: %s", path)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Failed to load config %s: %s", path, exc)
    _apply_config(cfg)

    env = {}
    if os.environ.get(Constants.ENV_INDEX_URL):
        env["index_url"] = os.environ[Constants.ENV_INDEX_URL]
    if os.environ.get(Constants.ENV_REQUEST_TIMEOUT):
        env["request_timeout"] = os.environ[Constants.ENV_REQUEST_TIMEOUT]
    _apply_config(env)
    return cfg
