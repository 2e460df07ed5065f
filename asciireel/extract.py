"""Extraction of audio, grayscale frames and ASCII art from a video file."""

import os
import subprocess
from contextlib import suppress

from .errors import FatalError, log_error
from .fsutil import create_dir, dir_contains
from .spinner import Spinner


class ExtractionError(FatalError):
    """Raised when an external tool fails to extract part of the video."""


class VideoNotFoundError(ExtractionError):
    """Raised when the input video cannot be found."""


def _fail(message):
    try:
        log_error(message, fatal=True)
    except FatalError:
        pass
    raise ExtractionError(message)


def _input_arguments(settings):
    args = [
        "ffmpeg",
        "-loglevel",
        "quiet",
        "-ss",
        settings.start_time,
        "-i",
        settings.video_path,
    ]
    if settings.duration > 0:
        args += ["-t", str(settings.duration)]
    return args


def audio_command(settings, layout):
    """Return the ffmpeg command that extracts the audio track as MP3."""
    return _input_arguments(settings) + [
        "-vn",
        "-acodec",
        "libmp3lame",
        "-q:a",
        "2",
        layout.audio_file(settings.video_name),
    ]


def frames_command(settings, layout):
    """Return the ffmpeg command that extracts scaled grayscale frames."""
    video_filter = f"fps={settings.fps},scale={settings.width}:-1,format=gray"
    return _input_arguments(settings) + [
        "-vf",
        video_filter,
        layout.frame_output_pattern(settings.video_name),
    ]


def ascii_command(input_path, output_path):
    """Return the jp2a command that renders one image as ASCII art."""
    return ["jp2a", f"--output={output_path}", input_path]


def _run(command):
    try:
        result = subprocess.run(command, stdin=subprocess.DEVNULL, check=False)
    except OSError:
        return False
    return result.returncode == 0


def _run_ffmpeg(command, label, failure, settings, stream):
    spinner = Spinner(label, stream=stream)
    spinner.start()
    ok = _run(command)
    spinner.stop(ok)
    if not ok:
        if not dir_contains(".", settings.video_path):
            raise VideoNotFoundError(f"Video file not found: {settings.video_path}")
        _fail(failure)


def extract_audio(settings, layout, stream=None):
    """Extract the audio track of the video, replacing any earlier one."""
    with suppress(FileNotFoundError):
        os.unlink(layout.audio_file(settings.video_name))
    _run_ffmpeg(
        audio_command(settings, layout),
        "Extracting audio",
        "Failed to extract audio",
        settings,
        stream,
    )


def extract_frames(settings, layout, stream=None):
    """Extract the video frames as grayscale PNG images."""
    _run_ffmpeg(
        frames_command(settings, layout),
        "Extracting frames",
        "Failed to extract frames",
        settings,
        stream,
    )


def _png_frames(frames_dir):
    for name in sorted(os.listdir(frames_dir)):
        stem, dot, ext = name.rpartition(".")
        if dot and ext.startswith("png"):
            yield name, stem


def convert_to_ascii(layout, stream=None):
    """Render every PNG frame as an ASCII text file.

    Returns the paths of the text files that were requested. Frames that
    fail to convert are skipped.
    """
    outputs = []
    with Spinner("Rendering ASCII art", stream=stream):
        try:
            frames = list(_png_frames(layout.frames_dir))
        except OSError:
            _fail(f"Failed to open directory: {layout.frames_dir}")
        for name, stem in frames:
            input_path = os.path.join(layout.frames_dir, name)
            output_path = os.path.join(layout.ascii_dir, f"{stem}.txt")
            _run(ascii_command(input_path, output_path))
            outputs.append(output_path)
    return outputs


def setup(settings, layout, stream=None):
    """Create the asset directories and extract everything the player needs."""
    if not settings.video_path:
        log_error(
            "Invalid path provided for video extraction, path is NULL", fatal=True
        )
    for directory in layout.directories():
        create_dir(directory)
    extract_audio(settings, layout, stream)
    extract_frames(settings, layout, stream)
    convert_to_ascii(layout, stream)