"""Configuration management for the status page CLI."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv

DEFAULT_CONFIG_PATH = Path("~/.statuspage.yml")
DEFAULT_TIMEOUT = 30.0

REQUIRED_KEYS = ("oauth", "base_url", "page")
INCIDENT_ORDERS = ("api", "created")


class ConfigError(ValueError):
    """Raised when the configuration file is missing or malformed."""
    pass


@dataclass(frozen=True)
class Config:
    """Configuration for one status page."""

    token: str
    base_url: str
    page_id: str
    timeout: float = DEFAULT_TIMEOUT
    incident_order: str = "api"

    @property
    def account_url(self) -> str:
        """Account root: the base URL with the page id appended."""
        return self.base_url + self.page_id


def _config_path(path: Optional[Union[str, Path]]) -> Path:
    if path is None:
        path = os.getenv("STATUSPAGE_CONFIG") or DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from the YAML config file.

    The file must define ``oauth``, ``base_url`` and ``page``. The token can
    be overridden with ``STATUSPAGE_OAUTH`` and the file location with
    ``STATUSPAGE_CONFIG`` (both also read from a ``.env`` file).

    Args:
        path: Explicit config file path. Defaults to ``~/.statuspage.yml``.

    Returns:
        Config: Validated configuration object.

    Raises:
        ConfigError: If the file is missing, unreadable or incomplete.
    """
    load_dotenv(find_dotenv(usecwd=True))
    config_path = _config_path(path)

    try:
        with open(config_path, "r") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found at {config_path}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file {config_path} is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping of keys")

    token = os.getenv("STATUSPAGE_OAUTH") or raw.get("oauth")
    values = {"oauth": token, "base_url": raw.get("base_url"), "page": raw.get("page")}
    missing = [key for key in REQUIRED_KEYS if not values[key]]
    if missing:
        raise ConfigError(
            f"Config file {config_path} is missing required key(s): {', '.join(missing)}"
        )

    timeout = raw.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"timeout must be a positive number, got {timeout!r}")

    incident_order = raw.get("incident_order", "api")
    if incident_order not in INCIDENT_ORDERS:
        raise ConfigError(
            f"incident_order must be one of {', '.join(INCIDENT_ORDERS)}, got {incident_order!r}"
        )

    return Config(
        token=str(values["oauth"]),
        base_url=str(values["base_url"]),
        page_id=str(values["page"]),
        timeout=float(timeout),
        incident_order=incident_order,
    )
