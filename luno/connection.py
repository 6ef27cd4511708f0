"""
HTTP connection to the Luno API.
"""

import os
import logging
from typing import Any, Dict, Optional, Type

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigurationError, ResponseError, TransportError, error_for_status

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.luno.io/v1"
DEFAULT_TIMEOUT = 30


class ApiKeyConnection:
    """Connection authenticated with an API key and secret."""

    def __init__(self, key: str, secret: str, base_url: str = DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the connection.

        Args:
            key: API key
            secret: API secret
            base_url: API base URL
            timeout: Request timeout in seconds
        """
        self.key = key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        # Setup session with headers
        self.session = requests.Session()
        self.session.auth = (key, secret)
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })

    @classmethod
    def from_env(cls) -> 'ApiKeyConnection':
        """Build a connection from LUNO_* environment variables."""
        key = os.getenv("LUNO_API_KEY")
        secret = os.getenv("LUNO_API_SECRET")
        if not key or not secret:
            raise ConfigurationError("LUNO_API_KEY and LUNO_API_SECRET must be set")

        return cls(
            key,
            secret,
            base_url=os.getenv("LUNO_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("LUNO_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    def get(self, path: str, params: Optional[Dict[str, str]] = None,
            model: Optional[Type[BaseModel]] = None) -> Any:
        return self.request('GET', path, params=params, model=model)

    def post(self, path: str, body: Any = None, params: Optional[Dict[str, str]] = None,
             model: Optional[Type[BaseModel]] = None) -> Any:
        return self.request('POST', path, body=body, params=params, model=model)

    def put(self, path: str, body: Any = None, params: Optional[Dict[str, str]] = None,
            model: Optional[Type[BaseModel]] = None) -> Any:
        return self.request('PUT', path, body=body, params=params, model=model)

    def patch(self, path: str, body: Any = None, params: Optional[Dict[str, str]] = None,
              model: Optional[Type[BaseModel]] = None) -> Any:
        return self.request('PATCH', path, body=body, params=params, model=model)

    def delete(self, path: str, params: Optional[Dict[str, str]] = None,
               model: Optional[Type[BaseModel]] = None) -> Any:
        return self.request('DELETE', path, params=params, model=model)

    def request(self, method: str, path: str, body: Any = None,
                params: Optional[Dict[str, str]] = None,
                model: Optional[Type[BaseModel]] = None) -> Any:
        """
        Send a request and decode the response.

        Args:
            method: HTTP verb
            path: Path relative to the base URL, e.g. "/users"
            body: Pydantic model or dict to send as JSON
            params: Flat query parameter map
            model: Pydantic model to validate the response into

        Returns:
            Instance of ``model``, or the decoded JSON when no model is given

        Raises:
            TransportError: if no response was received
            ApiError: if the API answered with an error status
            ResponseError: if a successful response cannot be decoded into ``model``
        """
        url = f"{self.base_url}{path}"
        if isinstance(body, BaseModel):
            body = body.model_dump(mode='json', by_alias=True, exclude_none=True)

        logger.debug(f"{method} {path} params={params}")
        try:
            response = self.session.request(
                method,
                url,
                params=params or None,
                json=body,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Request failed: {method} {path}: {e}")
            raise TransportError(f"Request failed: {e}", original=e) from e

        ok = 200 <= response.status_code < 300
        try:
            data = self._decode(response)
        except ValueError as e:
            if ok:
                logger.error(f"Invalid JSON in response to {method} {path}")
                raise ResponseError(response.status_code,
                                    "Response body is not valid JSON") from e
            data = None

        if not ok:
            error = error_for_status(response.status_code, data, reason=response.reason)
            logger.warning(f"API error on {method} {path}: {error}")
            raise error

        if model is None:
            return data
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Unexpected response to {method} {path}: {e}")
            raise ResponseError(response.status_code,
                                f"Response does not match {model.__name__}") from e

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        """Decode a JSON body. An empty body decodes to an empty dict."""
        if not response.content:
            return {}
        return response.json()

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
