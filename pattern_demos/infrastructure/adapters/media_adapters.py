"""Media player adapters (Adapter Pattern).

Each adapter owns exactly one adaptee, created when the adapter is, and
translates IMediaPlayer.play into the adaptee's native call.
"""
import logging

from pattern_demos.domain.interfaces.media_player import IMediaPlayer
from pattern_demos.infrastructure.adapters.media_players import (
    VLCPlayer,
    MP4Player,
    LegacyAudioPlayer
)


logger = logging.getLogger(__name__)


class VLCAdapter(IMediaPlayer):
    """Adapts VLCPlayer.play_vlc to IMediaPlayer."""
    
    def __init__(self):
        self._vlc_player = VLCPlayer()
    
    def play(self, filename: str) -> None:
        self._vlc_player.play_vlc(filename)


class MP4Adapter(IMediaPlayer):
    """Adapts MP4Player.play_mp4 to IMediaPlayer."""
    
    def __init__(self):
        self._mp4_player = MP4Player()
    
    def play(self, filename: str) -> None:
        self._mp4_player.play_mp4(filename)


class LegacyAudioAdapter(IMediaPlayer):
    """
    Adapts LegacyAudioPlayer.play_audio to IMediaPlayer.
    
    The legacy player needs a volume on every call, which the target
    interface has no room for, so the adapter supplies a fixed one.
    """
    
    def __init__(self, default_volume: int):
        """
        Initialize adapter.
        
        Args:
            default_volume: Volume passed to the legacy player for every file
        """
        self._legacy_player = LegacyAudioPlayer()
        self._default_volume = default_volume
    
    @property
    def default_volume(self) -> int:
        return self._default_volume
    
    def play(self, filename: str) -> None:
        logger.debug(f"Playing {filename} through legacy player at volume {self._default_volume}")
        self._legacy_player.play_audio(filename, self._default_volume)
