"""HTTP client for the status page REST API."""
import json
import logging
from typing import Any, Dict, Optional

import requests
import yaml

from .config import Config

log = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PATCH")


class StatusPageError(Exception):
    """Base exception for status page client errors."""
    pass


class ComponentNotFoundError(StatusPageError):
    """Raised when a component name fragment matches no known component."""
    pass


class ValidationError(StatusPageError):
    """Raised when a status value is not part of the allowed vocabulary."""
    pass


class UsageError(StatusPageError):
    """Raised when a command is missing required positional arguments."""
    pass


class TransportError(StatusPageError):
    """Raised when a request fails at the network level."""
    pass


class StatusPageClient:
    """Client for the status page API of a single page.

    Every request carries the ``Authorization: OAuth <token>`` header.
    Responses are not checked for HTTP errors: the parsed body is handed
    back to the caller whatever the status code.
    """

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            config: Loaded configuration with token and account root.
            session: Optional pre-built session (used by tests).
        """
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @property
    def account_url(self) -> str:
        return self.config.account_url

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"OAuth {self.config.token}"}

    def send(self, method: str, url: str, **options: Any) -> Any:
        """Send a request with the authorization header merged in.

        Args:
            method: One of GET, POST or PATCH.
            url: Absolute URL to call.
            **options: Extra keyword arguments for ``requests``; ``headers``
                are merged with the authorization header, which always wins.

        Returns:
            Parsed response body.

        Raises:
            ValueError: If the method is not supported.
            TransportError: If the request fails at the network level.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        headers = dict(options.pop("headers", None) or {})
        headers.update(self._auth_headers())
        options.setdefault("timeout", self.config.timeout)

        log.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, headers=headers, **options)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            log.warning("%s %s returned HTTP %s", method, url, response.status_code)
        return self._parse_body(response)

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, path: str) -> Any:
        """GET ``{account_url}{path}``."""
        return self.send("GET", f"{self.account_url}{path}")

    def post(self, path: str, data: Dict[str, Any]) -> Any:
        """POST form-encoded ``data`` to ``{account_url}{path}``."""
        return self.send("POST", f"{self.account_url}{path}", data=data)

    def patch(self, path: str, data: Dict[str, Any]) -> Any:
        """PATCH form-encoded ``data`` to ``{account_url}{path}``."""
        return self.send("PATCH", f"{self.account_url}{path}", data=data)

    def close(self) -> None:
        self.session.close()


def pretty_print(data: Any) -> None:
    """Print data as a YAML key-value dump.

    Args:
        data: Data to print (must be YAML serializable after a JSON pass).
    """
    # Round-trip through JSON so arbitrary objects degrade to strings.
    plain = json.loads(json.dumps(data, default=str))
    print(yaml.safe_dump(plain, default_flow_style=False, sort_keys=False), end="")
