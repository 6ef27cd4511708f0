"""
Client for /api_authentication. API keys are identified by their ``key``.
"""

from typing import Any, Optional, Type

from ..connection import ApiKeyConnection
from ..errors import ArgumentError
from ..models import (
    ApiAuthentication, CreateApiAuthentication, PaginationResponse, SuccessResponse,
    UpdateApiAuthentication,
)
from .utils import Expand, expand_params, list_params, parametrize, resolve_id


class ApiAuthenticationClient:
    """Operations on API keys."""

    def __init__(self, connection: ApiKeyConnection):
        self.connection = connection

    def create(self, api_authentication: Optional[CreateApiAuthentication] = None,
               expand: Expand = None, details_model: Optional[Type] = None,
               profile_model: Optional[Type] = None) -> ApiAuthentication:
        """
        Create an API key.

        Without ``user_id`` the key is a project level key.
        """
        body = api_authentication if api_authentication is not None else {}
        model = parametrize(ApiAuthentication, details_model, profile_model)
        return self.connection.post('/api_authentication', body, expand_params(expand), model=model)

    def get(self, api_authentication: Any, expand: Expand = None,
            details_model: Optional[Type] = None,
            profile_model: Optional[Type] = None) -> ApiAuthentication:
        key = resolve_id(api_authentication, 'api_authentication', attr='key')
        model = parametrize(ApiAuthentication, details_model, profile_model)
        return self.connection.get(f'/api_authentication/{key}', expand_params(expand), model=model)

    def get_all(self, from_: Optional[str] = None, to: Optional[str] = None,
                limit: int = 100, expand: Expand = None,
                details_model: Optional[Type] = None,
                profile_model: Optional[Type] = None) -> PaginationResponse:
        model = PaginationResponse[parametrize(ApiAuthentication, details_model, profile_model)]
        return self.connection.get('/api_authentication', list_params(from_, to, limit, expand),
                                   model=model)

    def update(self, api_authentication: Any,
               updated_api_authentication: Optional[ApiAuthentication] = None,
               destructive: bool = False) -> SuccessResponse:
        """Update an API key's details. PUT when destructive, PATCH otherwise."""
        key = resolve_id(api_authentication, 'api_authentication', attr='key')
        if updated_api_authentication is None:
            if isinstance(api_authentication, str):
                raise ArgumentError("updated_api_authentication must not be None")
            updated_api_authentication = api_authentication

        body = UpdateApiAuthentication.from_api_authentication(updated_api_authentication)
        path = f'/api_authentication/{key}'
        if destructive:
            return self.connection.put(path, body, model=SuccessResponse)
        return self.connection.patch(path, body, model=SuccessResponse)

    def delete(self, api_authentication: Any) -> SuccessResponse:
        """Revoke an API key."""
        key = resolve_id(api_authentication, 'api_authentication', attr='key')
        return self.connection.delete(f'/api_authentication/{key}', model=SuccessResponse)
