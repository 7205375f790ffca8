"""News agency and its subscribers."""

from pattern_demos.infrastructure.observers.news_agency import NewsAgency
from pattern_demos.infrastructure.observers.subscribers import (
    EmailSubscriber,
    SMSSubscriber,
    AppNotificationSubscriber,
)

__all__ = [
    "NewsAgency",
    "EmailSubscriber",
    "SMSSubscriber",
    "AppNotificationSubscriber",
]
