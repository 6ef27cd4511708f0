"""
Client for /events.
"""

from typing import Any, Optional, Type

from ..connection import ApiKeyConnection
from ..errors import ArgumentError
from ..models import CreateEvent, Event, PaginationResponse, SuccessResponse, UpdateEvent
from .utils import Expand, expand_params, list_params, parametrize, require, resolve_id


class EventsClient:
    """Operations on events. ``event`` arguments take an id or an Event."""

    def __init__(self, connection: ApiKeyConnection):
        self.connection = connection

    def create(self, event: CreateEvent, expand: Expand = None,
               details_model: Optional[Type] = None,
               profile_model: Optional[Type] = None) -> Event:
        """Trigger an event. ``event.user_id`` names the user it belongs to."""
        require(event, 'event')
        return self.connection.post('/events', event, expand_params(expand),
                                    model=parametrize(Event, details_model, profile_model))

    def get(self, event: Any, expand: Expand = None, details_model: Optional[Type] = None,
            profile_model: Optional[Type] = None) -> Event:
        event_id = resolve_id(event, 'event')
        return self.connection.get(f'/events/{event_id}', expand_params(expand),
                                   model=parametrize(Event, details_model, profile_model))

    def get_all(self, from_: Optional[str] = None, to: Optional[str] = None,
                limit: int = 100, expand: Expand = None,
                details_model: Optional[Type] = None,
                profile_model: Optional[Type] = None) -> PaginationResponse:
        """Get a page of recently triggered events."""
        model = PaginationResponse[parametrize(Event, details_model, profile_model)]
        return self.connection.get('/events', list_params(from_, to, limit, expand), model=model)

    def update(self, event: Any, updated_event: Optional[Event] = None,
               destructive: bool = False) -> SuccessResponse:
        """Update an event's name and details. PUT when destructive, PATCH otherwise."""
        event_id = resolve_id(event, 'event')
        if updated_event is None:
            if isinstance(event, str):
                raise ArgumentError("updated_event must not be None")
            updated_event = event

        body = UpdateEvent.from_event(updated_event)
        path = f'/events/{event_id}'
        if destructive:
            return self.connection.put(path, body, model=SuccessResponse)
        return self.connection.patch(path, body, model=SuccessResponse)
