"""Existing players with incompatible interfaces (Adapter Pattern adaptees).

None of these classes implement IMediaPlayer; each exposes its own native
method, which is why client code goes through the adapters instead.
"""


class VLCPlayer:
    """Player that only understands VLC files."""
    
    def play_vlc(self, filename: str) -> None:
        print(f"Playing VLC file: {filename}")


class MP4Player:
    """Player that only understands MP4 files."""
    
    def play_mp4(self, filename: str) -> None:
        print(f"Playing MP4 file: {filename}")


class LegacyAudioPlayer:
    """Old audio player that needs an explicit volume on every call."""
    
    def play_audio(self, filename: str, volume: int) -> None:
        print(f"Playing audio file: {filename} at volume: {volume}")
