"""HTTP request executor backed by a requests.Session.

Each instance owns its own session, so one executor per thread is the
safe way to share work across threads.
"""

import logging
from typing import Any, Dict, Optional
from xml.etree import ElementTree

import requests

from fitbit_gateway.clients.base import HTTP_METHODS, RequestExecutor
from fitbit_gateway.config import Config
from fitbit_gateway.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

RESPONSE_FORMATS = ('json', 'xml')


class HttpRequestExecutor(RequestExecutor):
    """Executor for the Fitbit web API using OAuth 2 bearer tokens."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        response_format: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        locale: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        response_format = (response_format or Config.RESPONSE_FORMAT).lower()
        if response_format not in RESPONSE_FORMATS:
            raise InvalidArgumentError(f"Unsupported response format: {response_format}")

        self.response_format = response_format
        self.base_url = (base_url or Config.API_BASE_URL).rstrip('/')
        self.api_version = str(api_version or Config.API_VERSION)
        self.session = session or requests.Session()

        access_token = access_token or Config.ACCESS_TOKEN
        if access_token:
            self.session.headers.update({"Authorization": f"Bearer {access_token}"})

        locale = locale or Config.LOCALE
        if locale:
            self.session.headers.update({
                "Accept-Language": locale,
                "Accept-Locale": locale,
            })

    def build_url(self, resource_path: str) -> str:
        """Full URL for ``resource_path`` including the format suffix."""
        path = resource_path.strip('/')
        return f"{self.base_url}/{self.api_version}/{path}.{self.response_format}"

    def execute(
        self,
        resource_path: str,
        method: str = 'GET',
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Any:
        method = method.upper()
        if method not in HTTP_METHODS:
            raise InvalidArgumentError(f"Unsupported HTTP method: {method}")

        url = self.build_url(resource_path)
        kwargs: Dict[str, Any] = {"timeout": Config.REQUEST_TIMEOUT}
        if parameters:
            if method == 'POST':
                kwargs["data"] = parameters
            else:
                kwargs["params"] = parameters

        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise

        return self._parse(response)

    def _parse(self, response: requests.Response) -> Any:
        """Decode a successful response; bodiless responses become ``True``."""
        if response.status_code == 204 or not response.content:
            return True

        if self.response_format == 'xml':
            return ElementTree.fromstring(response.content)
        return response.json()
