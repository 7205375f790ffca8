"""Domain interfaces following Dependency Inversion Principle."""

from pattern_demos.domain.interfaces.media_player import IMediaPlayer
from pattern_demos.domain.interfaces.coffee import ICoffee
from pattern_demos.domain.interfaces.file_system_component import IFileSystemComponent
from pattern_demos.domain.interfaces.observer import IObserver, ISubject
from pattern_demos.domain.interfaces.payment_strategy import IPaymentStrategy
from pattern_demos.domain.interfaces.image import IImage
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.interfaces.demo_manager import IDemoManager

__all__ = [
    "IMediaPlayer",
    "ICoffee",
    "IFileSystemComponent",
    "IObserver",
    "ISubject",
    "IPaymentStrategy",
    "IImage",
    "IDemo",
    "IDemoManager",
]
