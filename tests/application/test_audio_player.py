"""Tests for suffix based adapter dispatch."""
from unittest.mock import Mock, patch

import pytest
from prometheus_client import REGISTRY

from pattern_demos.application.services.audio_player import (
    AudioPlayer,
    DEFAULT_VOLUME,
    DEFAULT_FORMAT_ADAPTERS
)
from pattern_demos.domain.interfaces.media_player import IMediaPlayer
from pattern_demos.infrastructure.adapters.media_adapters import (
    VLCAdapter,
    MP4Adapter,
    LegacyAudioAdapter
)


def mock_factories():
    """Ordered adapter table whose factories hand out mock adapters."""
    factories = {
        "vlc": Mock(return_value=Mock(spec=IMediaPlayer)),
        "mp4": Mock(return_value=Mock(spec=IMediaPlayer)),
        "legacy": Mock(return_value=Mock(spec=IMediaPlayer)),
    }
    table = [
        ((".vlc",), factories["vlc"]),
        ((".mp4",), factories["mp4"]),
        ((".wav", ".mp3"), factories["legacy"]),
    ]
    return table, factories


def test_audio_player_is_a_media_player():
    assert isinstance(AudioPlayer(), IMediaPlayer)


def test_default_volume():
    assert DEFAULT_VOLUME == 75


@pytest.mark.parametrize("filename,expected", [
    ("movie.vlc", "vlc"),
    ("video.mp4", "mp4"),
    ("sound.wav", "legacy"),
    ("song.mp3", "legacy"),
    ("archive.tar.mp3", "legacy"),
    ("my movie.final.vlc", "vlc"),
])
def test_recognized_suffix_invokes_exactly_one_adapter(filename, expected):
    table, factories = mock_factories()

    AudioPlayer(format_adapters=table).play(filename)

    for key, factory in factories.items():
        if key == expected:
            factory.assert_called_once_with()
            factory.return_value.play.assert_called_once_with(filename)
        else:
            factory.assert_not_called()


@pytest.mark.parametrize("filename", ["doc.pdf", "", "mp3", "song.MP3", "movie.vlc.bak", "video.mp4 "])
def test_unrecognized_suffix_invokes_no_adapter(filename, capsys):
    table, factories = mock_factories()

    AudioPlayer(format_adapters=table).play(filename)

    for factory in factories.values():
        factory.assert_not_called()
    out = capsys.readouterr().out
    assert out == f"Unsupported format: {filename}\n"


def test_first_match_wins():
    first = Mock(return_value=Mock(spec=IMediaPlayer))
    second = Mock(return_value=Mock(spec=IMediaPlayer))
    player = AudioPlayer(format_adapters=[((".mp3",), first), (("3",), second)])

    player.play("song.mp3")

    first.assert_called_once_with()
    second.assert_not_called()


def test_none_filename_is_rejected():
    with pytest.raises(ValueError, match="filename is required"):
        AudioPlayer().play(None)


def test_new_adapter_per_file():
    table, factories = mock_factories()
    player = AudioPlayer(format_adapters=table)

    player.play("a.vlc")
    player.play("b.vlc")

    assert factories["vlc"].call_count == 2


@pytest.mark.parametrize("filename,adapter_type", [
    ("movie.vlc", VLCAdapter),
    ("video.mp4", MP4Adapter),
    ("song.mp3", LegacyAudioAdapter),
    ("sound.wav", LegacyAudioAdapter),
])
def test_select_adapter_with_default_table(filename, adapter_type):
    suffix, adapter = AudioPlayer().select_adapter(filename)

    assert filename.endswith(suffix)
    assert type(adapter) is adapter_type


def test_select_adapter_without_match():
    assert AudioPlayer().select_adapter("doc.pdf") is None


def test_mp3_uses_legacy_adapter_at_default_volume(capsys):
    AudioPlayer().play("song.mp3")
    assert capsys.readouterr().out == "Playing audio file: song.mp3 at volume: 75\n"


def test_vlc_uses_vlc_adapter(capsys):
    with patch.object(VLCAdapter, "play", autospec=True) as play:
        AudioPlayer().play("movie.vlc")

    play.assert_called_once()
    assert play.call_args.args[1] == "movie.vlc"


def test_pdf_prints_diagnostic_once(capsys):
    AudioPlayer().play("doc.pdf")
    assert capsys.readouterr().out == "Unsupported format: doc.pdf\n"


def test_default_table_order():
    assert [suffixes for suffixes, _ in DEFAULT_FORMAT_ADAPTERS] == [(".vlc",), (".mp4",), (".wav", ".mp3")]


def test_dispatch_is_counted(metrics_enabled):
    def value(labels):
        return REGISTRY.get_sample_value("pattern_demos_media_dispatch_total", labels) or 0.0

    played = {"format": ".wav", "status": "played"}
    unsupported = {"format": "unknown", "status": "unsupported"}
    played_before, unsupported_before = value(played), value(unsupported)

    player = AudioPlayer()
    player.play("sound.wav")
    player.play("doc.pdf")

    assert value(played) == played_before + 1
    assert value(unsupported) == unsupported_before + 1
