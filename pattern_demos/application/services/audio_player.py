"""Audio player dispatching files to adapters by suffix (Adapter Pattern client).

The player is itself an IMediaPlayer: it looks at the file suffix, picks the
adapter registered for it and hands the filename over unchanged.
"""
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from pattern_demos.domain.interfaces.media_player import IMediaPlayer
from pattern_demos.infrastructure.adapters.media_adapters import (
    VLCAdapter,
    MP4Adapter,
    LegacyAudioAdapter
)
from pattern_demos.infrastructure.monitoring import track_media_dispatch


logger = logging.getLogger(__name__)

DEFAULT_VOLUME = 75

AdapterFactory = Callable[[], IMediaPlayer]

# Checked in this order, first match wins
DEFAULT_FORMAT_ADAPTERS: List[Tuple[Tuple[str, ...], AdapterFactory]] = [
    ((".vlc",), VLCAdapter),
    ((".mp4",), MP4Adapter),
    ((".wav", ".mp3"), lambda: LegacyAudioAdapter(DEFAULT_VOLUME)),
]


class AudioPlayer(IMediaPlayer):
    """
    Media player that selects an adapter at runtime.
    
    A new adapter is created for every file and discarded after playing it.
    Files whose suffix matches no entry are reported as unsupported; that is
    a normal outcome, not an error.
    """
    
    def __init__(
        self,
        format_adapters: Optional[Sequence[Tuple[Tuple[str, ...], AdapterFactory]]] = None
    ):
        """
        Initialize audio player (Dependency Injection).
        
        Args:
            format_adapters: Ordered (suffixes, adapter factory) pairs.
                Defaults to VLC, MP4, then WAV/MP3 through the legacy player.
        """
        self._format_adapters = list(
            format_adapters if format_adapters is not None else DEFAULT_FORMAT_ADAPTERS
        )
    
    def select_adapter(self, filename: str) -> Optional[Tuple[str, IMediaPlayer]]:
        """
        Create the adapter for a file.
        
        Args:
            filename: File to play
            
        Returns:
            Tuple of (matched suffix, new adapter), or None if no suffix matches
            
        Raises:
            ValueError: If filename is None
        """
        if filename is None:
            raise ValueError("filename is required")
        
        for suffixes, adapter_factory in self._format_adapters:
            for suffix in suffixes:
                if filename.endswith(suffix):
                    return suffix, adapter_factory()
        return None
    
    def play(self, filename: str) -> None:
        selection = self.select_adapter(filename)
        
        if selection is None:
            logger.debug(f"No adapter registered for {filename!r}")
            track_media_dispatch("unknown", supported=False)
            print(f"Unsupported format: {filename}")
            return
        
        suffix, adapter = selection
        logger.debug(f"Dispatching {filename!r} to {adapter.__class__.__name__}")
        track_media_dispatch(suffix, supported=True)
        adapter.play(filename)
