"""
Request building helpers shared by the entity clients.
"""

from typing import Any, Dict, Optional, Sequence, Union
from urllib.parse import quote

from ..errors import ArgumentError

Expand = Optional[Union[str, Sequence[str]]]


def path_segment(value: str) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(str(value), safe='')


def resolve_id(value: Any, name: str, attr: str = 'id') -> str:
    """
    Return the identifier of an entity, or pass an identifier through,
    escaped for use as a path segment.

    Args:
        value: Identifier string or a fetched model carrying ``attr``
        name: Argument name used in the error message
        attr: Attribute holding the identifier

    Raises:
        ArgumentError: if value is None or carries no identifier
    """
    if value is None:
        raise ArgumentError(f"{name} must not be None")
    if isinstance(value, str):
        identifier = value
    else:
        identifier = getattr(value, attr, None)
    if not identifier:
        raise ArgumentError(f"{name} has no {attr}")
    return path_segment(identifier)


def require(value: Any, name: str) -> Any:
    if value is None:
        raise ArgumentError(f"{name} must not be None")
    if isinstance(value, str) and not value:
        raise ArgumentError(f"{name} must not be empty")
    return value


def bool_param(value: bool) -> str:
    return 'true' if value else 'false'


def expand_params(expand: Expand = None) -> Dict[str, str]:
    """Query map holding ``expand`` when given."""
    params = {}
    if expand is not None:
        if isinstance(expand, str):
            expand = [expand]
        params['expand'] = ','.join(expand)
    return params


def list_params(from_: Optional[str] = None, to: Optional[str] = None,
                limit: int = 100, expand: Expand = None) -> Dict[str, str]:
    """Query map for a paginated list. ``limit`` is always sent."""
    params = {'limit': str(limit)}
    if from_ is not None:
        params['from'] = from_
    if to is not None:
        params['to'] = to
    params.update(expand_params(expand))
    return params


def parametrize(model: Any, *type_args: Any) -> Any:
    """Bind generic parameters, leaving the model untyped when none are given."""
    if all(arg is None for arg in type_args):
        return model
    args = tuple(Any if arg is None else arg for arg in type_args)
    return model[args if len(args) > 1 else args[0]]
