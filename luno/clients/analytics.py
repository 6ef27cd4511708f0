"""
Client for /analytics.
"""

from typing import Dict, Optional

from ..connection import ApiKeyConnection
from ..errors import ArgumentError
from ..models import AnalyticsOverview, AnalyticsTimeline
from .utils import path_segment, require

TIMELINE_RESOURCES = ('users', 'sessions', 'events')


def _timeline_params(from_: Optional[str], to: Optional[str],
                     group: Optional[str]) -> Dict[str, str]:
    params = {}
    if from_ is not None:
        params['from'] = from_
    if to is not None:
        params['to'] = to
    if group is not None:
        params['group'] = group
    return params


class AnalyticsClient:
    """Read-only usage statistics."""

    def __init__(self, connection: ApiKeyConnection):
        self.connection = connection

    def overview(self) -> AnalyticsOverview:
        """Get totals for users, sessions and events."""
        return self.connection.get('/analytics', model=AnalyticsOverview)

    def timeline(self, resource: str, from_: Optional[str] = None, to: Optional[str] = None,
                 group: Optional[str] = None) -> AnalyticsTimeline:
        """
        Get counts over time for one resource.

        Args:
            resource: One of "users", "sessions" or "events"
            from_: First date to include
            to: Last date to include
            group: Bucket size, e.g. "day" or "month"
        """
        if resource not in TIMELINE_RESOURCES:
            raise ArgumentError(f"resource must be one of {', '.join(TIMELINE_RESOURCES)}")
        return self.connection.get(f'/analytics/{resource}', _timeline_params(from_, to, group),
                                   model=AnalyticsTimeline)

    def event_timeline(self, name: str, from_: Optional[str] = None, to: Optional[str] = None,
                       group: Optional[str] = None) -> AnalyticsTimeline:
        """Get counts over time for events with the given name."""
        name = path_segment(require(name, 'name'))
        return self.connection.get(f'/analytics/events/{name}', _timeline_params(from_, to, group),
                                   model=AnalyticsTimeline)
