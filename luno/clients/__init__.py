from .analytics import AnalyticsClient
from .api_authentication import ApiAuthenticationClient
from .events import EventsClient
from .sessions import SessionsClient
from .users import UsersClient

__all__ = [
    "AnalyticsClient",
    "ApiAuthenticationClient",
    "EventsClient",
    "SessionsClient",
    "UsersClient",
]
