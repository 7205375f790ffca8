"""Concrete news subscribers (Observer Pattern)."""
from pattern_demos.domain.interfaces.observer import IObserver


class EmailSubscriber(IObserver):
    """Subscriber notified by email."""
    
    def __init__(self, email: str):
        self.email = email
    
    def update(self, news: str) -> None:
        print(f"Email sent to {self.email}: {news}")


class SMSSubscriber(IObserver):
    """Subscriber notified by text message."""
    
    def __init__(self, phone_number: str):
        self.phone_number = phone_number
    
    def update(self, news: str) -> None:
        print(f"SMS sent to {self.phone_number}: {news}")


class AppNotificationSubscriber(IObserver):
    """Subscriber notified through a push notification."""
    
    def __init__(self, username: str):
        self.username = username
    
    def update(self, news: str) -> None:
        print(f"Push notification to {self.username}'s app: {news}")
