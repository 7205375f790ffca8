"""News agency subject (Observer Pattern)."""
import logging
from typing import List, Optional

from pattern_demos.domain.interfaces.observer import IObserver, ISubject


class NewsAgency(ISubject):
    """
    Subject that pushes every published news item to its subscribers.
    
    Subscribers are kept in subscription order and notified synchronously,
    one after the other. The same subscriber can be added more than once
    and is then notified once per subscription.
    """
    
    def __init__(self):
        """Initialize news agency with no subscribers."""
        self._observers: List[IObserver] = []
        self._latest_news: Optional[str] = None
        self._logger = logging.getLogger(__name__)
    
    @property
    def latest_news(self) -> Optional[str]:
        return self._latest_news
    
    def get_observers(self) -> List[IObserver]:
        return self._observers.copy()
    
    def subscribe(self, observer: IObserver) -> None:
        """
        Add a subscriber.
        
        Args:
            observer: Subscriber to notify on every publish
            
        Raises:
            ValueError: If observer does not implement IObserver
        """
        if not isinstance(observer, IObserver):
            raise ValueError("Observer must implement IObserver")
        
        self._observers.append(observer)
        print("New subscriber added!")
        self._logger.debug(f"Subscribed {observer.__class__.__name__} ({len(self._observers)} total)")
    
    def unsubscribe(self, observer: IObserver) -> None:
        """
        Remove the first subscription held by this exact observer.
        
        Unsubscribing an observer that is not subscribed does nothing.
        
        Args:
            observer: Subscriber to remove
        """
        for index, subscribed in enumerate(self._observers):
            if subscribed is observer:
                del self._observers[index]
                print("Subscriber removed!")
                return
        
        self._logger.warning(f"{observer.__class__.__name__} is not subscribed, nothing removed")
    
    def notify_observers(self) -> None:
        # Iterate over a snapshot so an observer unsubscribing during
        # notification only takes effect on the next publish
        for observer in tuple(self._observers):
            observer.update(self._latest_news)
    
    def publish_news(self, news: str) -> None:
        """
        Store the news and notify every subscriber.
        
        Args:
            news: News text to publish
        """
        self._latest_news = news
        print("\n--- Breaking News Published ---")
        self.notify_observers()
