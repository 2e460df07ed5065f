"""Playback settings, the on-disk asset layout and the usage text."""

import os
from dataclasses import dataclass

ASSETS_DIR = "assets"

DEFAULT_FPS = 10
DEFAULT_WIDTH = 900
DEFAULT_HEIGHT = 600
DEFAULT_START_TIME = "00:00:00"
DEFAULT_VIDEO_PATH = "rr.mp4"
DEFAULT_VIDEO_NAME = "rr"
DEFAULT_DURATION = 0


@dataclass
class Settings:
    """Options that control extraction and playback.

    A ``duration`` of 0 means the whole video.
    """

    video_path: str = DEFAULT_VIDEO_PATH
    video_name: str = DEFAULT_VIDEO_NAME
    fps: int = DEFAULT_FPS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    start_time: str = DEFAULT_START_TIME
    duration: int = DEFAULT_DURATION

    def reset_defaults(self):
        """Restore default values and clear the video path and name."""
        self.fps = DEFAULT_FPS
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self.start_time = DEFAULT_START_TIME
        self.duration = DEFAULT_DURATION
        self.video_path = ""
        self.video_name = ""


@dataclass(frozen=True)
class AssetLayout:
    """Where extracted audio, frames and ASCII art are kept."""

    root: str = ASSETS_DIR

    @property
    def audio_dir(self):
        return os.path.join(self.root, "audio")

    @property
    def ascii_dir(self):
        return os.path.join(self.root, "ascii")

    @property
    def frames_dir(self):
        return os.path.join(self.root, "frames")

    def directories(self):
        """Return every asset directory, parents before children."""
        return [self.root, self.ascii_dir, self.audio_dir, self.frames_dir]

    def audio_file(self, video_name):
        """Return the path of the extracted audio track of ``video_name``."""
        return os.path.join(self.audio_dir, f"{video_name}.mp3")

    def frame_output_pattern(self, video_name):
        """Return the numbered output pattern for extracted grayscale frames."""
        return os.path.join(self.frames_dir, f"{video_name}_gray_%04d.png")

    def ascii_glob(self, video_name):
        """Return the shell pattern matching the ASCII frame names of a video."""
        return f"{video_name}_gray_*.txt"


def video_name_from_path(path):
    """Return the file name of ``path`` without directories or extension."""
    base = path.rpartition("/")[2]
    stem, dot, _ = base.rpartition(".")
    return stem if dot else base


def usage_message(program_name):
    """Return the help text describing every command-line option."""
    return (
        f"Usage: {program_name} [OPTIONS]\n\n"
        "Options:\n"
        "  -i, --input FILE       Path to a video file to process\n"
        f"  -f, --fps N            Frames per second (default: {DEFAULT_FPS})\n"
        f"  -w, --width N          Width in characters (default: {DEFAULT_WIDTH})\n"
        f"  -t, --height N         Height in characters (default: {DEFAULT_HEIGHT})\n"
        f"  -s, --start TIME       Start time in HH:MM:SS format (default: {DEFAULT_START_TIME})\n"
        "  -d, --duration SEC     Duration in seconds (default: full video)\n"
        "  -p, --play NAME        Play a previously converted video by name\n"
        "  -r, --reset            Reset all settings and delete all extracted files\n"
        "                         WARNING: This will permanently delete all videos!\n"
        "  -h, --help             Display this help message\n\n"
        "Examples:\n"
        f"  {program_name} -p rr               Play the default \"rickroll\" video\n"
        f"  {program_name} -i video.mp4        Convert and play a new video\n"
        f"  {program_name} -i video.mp4 -s 00:01:30 -d 10  Start at 1:30, play for 10 seconds\n"
    )