"""Interface for media players (Adapter Pattern target).

Every player the client code talks to exposes a single ``play`` operation,
whatever the underlying decoder looks like:
- VLC player
- MP4 player
- Legacy audio player
"""
from abc import ABC, abstractmethod


class IMediaPlayer(ABC):
    """
    Target interface for the Adapter Pattern.
    
    Adapters wrap players with incompatible native methods and expose them
    through this interface so they can be used interchangeably.
    """
    
    @abstractmethod
    def play(self, filename: str) -> None:
        """
        Play a media file.
        
        Args:
            filename: Name of the file to play, passed through unmodified
        """
        pass
