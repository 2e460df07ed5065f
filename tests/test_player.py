import io
import os

import pytest

from asciireel.config import AssetLayout
from asciireel.errors import FatalError
from asciireel.player import (
    PlaybackError,
    audio_player_command,
    draw_ascii_frame,
    draw_frames,
    find_available_player,
    list_frames,
    natural_sort_key,
    play,
    video_extracted,
)

CLEAR = "\033[2J\033[1;1H"


@pytest.fixture
def layout(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = AssetLayout(str(tmp_path / "assets"))
    for directory in result.directories():
        os.makedirs(directory, exist_ok=True)
    return result


def _touch(path, text="", mode=None):
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
    if mode is not None:
        os.chmod(path, mode)


def test_find_player_prefers_earlier_entries(tmp_path):
    _touch(tmp_path / "aplay", mode=0o755)
    _touch(tmp_path / "ffplay", mode=0o755)
    assert find_available_player(str(tmp_path)) == "ffplay"


def test_find_player_skips_missing(tmp_path):
    _touch(tmp_path / "vlc", mode=0o755)
    _touch(tmp_path / "mpv", mode=0o755)
    assert find_available_player(str(tmp_path)) == "mpv"


def test_find_player_none(tmp_path):
    assert find_available_player(str(tmp_path)) is None


def test_ffplay_command():
    assert audio_player_command("ffplay", "a.mp3") == [
        "ffplay",
        "-nodisp",
        "-autoexit",
        "-loglevel",
        "quiet",
        "a.mp3",
    ]


def test_aplay_command():
    assert audio_player_command("aplay", "a.mp3") == ["aplay", "-q", "a.mp3"]


@pytest.mark.parametrize("player", ["ffplay", "mpv", "mplayer", "vlc", "aplay"])
def test_commands_start_with_player_and_end_with_file(player):
    command = audio_player_command(player, "track.mp3")
    assert command[0] == player
    assert command[-1] == "track.mp3"


def test_unknown_player_rejected():
    with pytest.raises(PlaybackError, match="Failed to play audio with winamp"):
        audio_player_command("winamp", "a.mp3")


def test_natural_sort_orders_numbers_by_value():
    one = natural_sort_key("rr_gray_1.txt")
    two = natural_sort_key("rr_gray_2.txt")
    ten = natural_sort_key("rr_gray_10.txt")
    assert one < two
    assert two < ten
    assert one < ten


def test_list_frames_filters_and_orders(layout):
    for name in ["clip_gray_10.txt", "clip_gray_2.txt", "other_gray_1.txt", "clip.png"]:
        _touch(os.path.join(layout.ascii_dir, name))
    frames = list_frames(layout, "clip")
    assert [os.path.basename(path) for path in frames] == [
        "clip_gray_2.txt",
        "clip_gray_10.txt",
    ]


def test_list_frames_missing_directory(tmp_path):
    assert list_frames(AssetLayout(str(tmp_path / "nowhere")), "clip") == []


def test_draw_ascii_frame(tmp_path):
    frame = tmp_path / "frame.txt"
    _touch(frame, "ab\ncd\n")
    out = io.StringIO()
    draw_ascii_frame(str(frame), out)
    assert out.getvalue() == "ab\ncd\n\n"


def test_draw_ascii_frame_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FatalError, match="Failed to open file"):
        draw_ascii_frame(str(tmp_path / "absent.txt"), io.StringIO())


def test_draw_frames_in_order(layout):
    _touch(os.path.join(layout.ascii_dir, "clip_gray_10.txt"), "second")
    _touch(os.path.join(layout.ascii_dir, "clip_gray_2.txt"), "first")
    out = io.StringIO()
    assert draw_frames(layout, "clip", 60, out) == 2
    text = out.getvalue()
    assert text.count(CLEAR) == 3
    assert text.index("first") < text.index("second")


def test_draw_frames_without_frames(layout):
    out = io.StringIO()
    assert draw_frames(layout, "clip", 60, out) == 0
    assert out.getvalue() == CLEAR


def test_draw_frames_rejects_zero_fps(layout):
    with pytest.raises(ValueError):
        draw_frames(layout, "clip", 0, io.StringIO())


def test_video_extracted(layout):
    assert video_extracted(layout, "clip") is False
    _touch(os.path.join(layout.audio_dir, "clip.mp3"))
    assert video_extracted(layout, "clip") is False
    _touch(os.path.join(layout.ascii_dir, "clip_gray_0001.txt"))
    assert video_extracted(layout, "clip") is True
    assert video_extracted(layout, "other") is False


def test_play_without_frames(layout):
    with pytest.raises(PlaybackError, match="No ASCII art frames found"):
        play(layout, "rr", 10)


def test_play_unknown_video(layout):
    _touch(os.path.join(layout.ascii_dir, "rr_gray_0001.txt"))
    with pytest.raises(PlaybackError, match="other doesn't exist"):
        play(layout, "other", 10)