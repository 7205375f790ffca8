"""Observer pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.infrastructure.observers.news_agency import NewsAgency
from pattern_demos.infrastructure.observers.subscribers import (
    EmailSubscriber,
    SMSSubscriber,
    AppNotificationSubscriber
)


class ObserverDemo(IDemo):
    """Publishes news to three subscribers, drops one, publishes again."""
    
    def get_name(self) -> str:
        return "observer"
    
    def get_description(self) -> str:
        return "Observer: notify email, SMS and app subscribers of breaking news"
    
    def run(self) -> None:
        news_agency = NewsAgency()
        
        email_subscriber = EmailSubscriber("john@email.com")
        sms_subscriber = SMSSubscriber("+1234567890")
        app_subscriber = AppNotificationSubscriber("john_doe")
        
        news_agency.subscribe(email_subscriber)
        news_agency.subscribe(sms_subscriber)
        news_agency.subscribe(app_subscriber)
        
        news_agency.publish_news("Design Patterns are awesome!")
        
        news_agency.unsubscribe(sms_subscriber)
        
        news_agency.publish_news("Observer Pattern implemented successfully!")
