"""Terminal playback of extracted ASCII frames with the matching audio track."""

import os
import re
import subprocess
import sys
import time
from fnmatch import fnmatchcase

from .config import DEFAULT_VIDEO_NAME
from .errors import FatalError, log_error
from .fsutil import dir_contains, is_directory_empty

PLAYERS = ("ffplay", "mpv", "mplayer", "vlc", "aplay")
DEFAULT_SEARCH_DIR = "/usr/bin"

_CLEAR_AND_HOME = "\033[2J\033[1;1H"
_PLAYER_OPTIONS = {
    "ffplay": ["-nodisp", "-autoexit", "-loglevel", "quiet"],
    "mpv": ["--no-video", "--really-quiet"],
    "mplayer": ["-novideo", "-really-quiet"],
    "vlc": ["--intf", "dummy", "--no-video"],
    "aplay": ["-q"],
}
_DIGIT_RUNS = re.compile(r"(\d+)")


class PlaybackError(FatalError):
    """Raised when a video cannot be played."""


def find_available_player(search_dir=DEFAULT_SEARCH_DIR):
    """Return the first known audio player that is executable in ``search_dir``."""
    for player in PLAYERS:
        if os.access(os.path.join(search_dir, player), os.X_OK):
            return player
    return None


def audio_player_command(player, audio_file):
    """Return the command that plays ``audio_file`` with ``player`` and no video."""
    try:
        options = _PLAYER_OPTIONS[player]
    except KeyError:
        raise PlaybackError(f"Failed to play audio with {player}") from None
    return [player, *options, audio_file]


def natural_sort_key(name):
    """Return a key that orders embedded numbers by value, like ``sort -V``."""
    parts = _DIGIT_RUNS.split(name)
    return tuple(int(part) if index % 2 else part for index, part in enumerate(parts))


def list_frames(layout, video_name):
    """Return the ASCII frame files of ``video_name`` in playback order."""
    directory = layout.ascii_dir
    try:
        names = os.listdir(directory)
    except OSError:
        return []
    pattern = f"{video_name}*.txt"
    matches = sorted(
        (name for name in names if fnmatchcase(name, pattern)), key=natural_sort_key
    )
    return [os.path.join(directory, name) for name in matches]


def draw_ascii_frame(path, out=None):
    """Write the contents of one ASCII frame file followed by a newline."""
    stream = out if out is not None else sys.stdout
    if path is None:
        log_error("Invalid frame path provided, path is NULL", fatal=True)
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                stream.write(line)
    except OSError:
        log_error(f"Failed to open file: {path}", fatal=True)
    stream.write("\n")


def draw_frames(layout, video_name, fps, out=None):
    """Show every frame of ``video_name`` at ``fps`` frames per second.

    Returns the number of frames drawn.
    """
    if fps <= 0:
        raise ValueError("fps must be positive")
    stream = out if out is not None else sys.stdout
    delay = (1_000_000 // fps) / 1_000_000
    stream.write(_CLEAR_AND_HOME)
    count = 0
    for frame in list_frames(layout, video_name):
        stream.write(_CLEAR_AND_HOME)
        draw_ascii_frame(frame, stream)
        stream.flush()
        count += 1
        time.sleep(delay)
    return count


def video_extracted(layout, video_name):
    """Return True if both the audio track and ASCII frames of a video exist."""
    if is_directory_empty(layout.audio_dir) or is_directory_empty(layout.ascii_dir):
        return False
    return dir_contains(layout.audio_dir, f"{video_name}.mp3") and dir_contains(
        layout.ascii_dir, layout.ascii_glob(video_name)
    )


def _start_audio(audio_file):
    player = find_available_player()
    if player is None:
        return None
    try:
        return subprocess.Popen(
            audio_player_command(player, audio_file),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return None


def play(layout, video_name, fps):
    """Play the ASCII frames of ``video_name`` in the terminal with its audio."""
    if is_directory_empty(layout.ascii_dir):
        raise PlaybackError(
            "No ASCII art frames found. "
            "Please extract video using -i <video_path> first."
        )
    if not video_extracted(layout, video_name) and video_name != DEFAULT_VIDEO_NAME:
        raise PlaybackError(
            f"{video_name} doesn't exist, try inserting a new one with -i <video_path>"
        )
    audio = _start_audio(layout.audio_file(video_name))
    try:
        draw_frames(layout, video_name, fps)
    except BaseException:
        if audio is not None:
            audio.terminate()
        raise
    finally:
        if audio is not None:
            audio.wait()