"""Interfaces for publish/subscribe notification (Observer Pattern)."""
from abc import ABC, abstractmethod


class IObserver(ABC):
    """Interface for subscribers notified by a subject."""
    
    @abstractmethod
    def update(self, news: str) -> None:
        """
        Receive the latest published value.
        
        Args:
            news: Latest news published by the subject
        """
        pass


class ISubject(ABC):
    """
    Interface for subjects holding an ordered list of observers.
    
    Observers are notified synchronously, in subscription order.
    """
    
    @abstractmethod
    def subscribe(self, observer: IObserver) -> None:
        """Add an observer at the end of the subscriber list."""
        pass
    
    @abstractmethod
    def unsubscribe(self, observer: IObserver) -> None:
        """Remove an observer (by identity) from the subscriber list."""
        pass
    
    @abstractmethod
    def notify_observers(self) -> None:
        """Push the latest value to every subscribed observer."""
        pass
