"""Adapter pattern demo."""
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.interfaces.media_player import IMediaPlayer
from pattern_demos.application.services.audio_player import AudioPlayer
from pattern_demos.infrastructure.adapters.media_adapters import VLCAdapter, MP4Adapter


class AdapterDemo(IDemo):
    """Plays several formats through one interface, then uses adapters directly."""
    
    def get_name(self) -> str:
        return "adapter"
    
    def get_description(self) -> str:
        return "Adapter: play VLC, MP4 and legacy audio files through one media player interface"
    
    def run(self) -> None:
        player = AudioPlayer()
        
        print("=== Media Player with Adapters ===\n")
        
        player.play("movie.vlc")
        player.play("video.mp4")
        player.play("song.mp3")
        player.play("sound.wav")
        player.play("document.pdf")  # Unsupported format
        
        print("\n=== Using Adapters Directly ===\n")
        
        vlc_adapter: IMediaPlayer = VLCAdapter()
        vlc_adapter.play("another_movie.vlc")
        
        mp4_adapter: IMediaPlayer = MP4Adapter()
        mp4_adapter.play("another_video.mp4")
