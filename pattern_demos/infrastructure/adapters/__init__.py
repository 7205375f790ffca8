"""Adapters exposing incompatible players through IMediaPlayer."""

from pattern_demos.infrastructure.adapters.media_players import VLCPlayer, MP4Player, LegacyAudioPlayer
from pattern_demos.infrastructure.adapters.media_adapters import VLCAdapter, MP4Adapter, LegacyAudioAdapter

__all__ = [
    "VLCPlayer",
    "MP4Player",
    "LegacyAudioPlayer",
    "VLCAdapter",
    "MP4Adapter",
    "LegacyAudioAdapter",
]
