"""Command-line entry point: extract a video as ASCII art and play it."""

import argparse
import os
import sys

from .colors import Ansi
from .config import AssetLayout, Settings, usage_message, video_name_from_path
from .errors import (
    FatalError,
    user_error,
    user_info,
    user_prompt,
    user_response,
    user_success,
    user_warning,
)
from .extract import VideoNotFoundError, setup
from .fsutil import empty_directory
from .player import PlaybackError, play
from .validation import is_valid_integer, is_valid_timestamp

_PROGRAM = "asciireel"


class _UserFatal(Exception):
    """A problem with the user's input that ends the program."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise argparse.ArgumentError(None, message)


class _Record(argparse.Action):
    """Keep every option, in the order given, as ``(dest, value)``."""

    def __call__(self, parser, namespace, values, option_string=None):
        recorded = list(getattr(namespace, "actions", None) or [])
        recorded.append((self.dest, values if self.nargs != 0 else None))
        namespace.actions = recorded


def build_parser(program_name):
    """Return the option parser; parsed options land in ``actions`` in order."""
    parser = _Parser(prog=program_name, add_help=False)
    parser.set_defaults(actions=None)
    for short, long in [
        ("-i", "--input"),
        ("-f", "--fps"),
        ("-w", "--width"),
        ("-t", "--height"),
        ("-s", "--start"),
        ("-d", "--duration"),
        ("-p", "--play"),
    ]:
        parser.add_argument(short, long, action=_Record)
    parser.add_argument("-r", "--reset", action=_Record, nargs=0)
    parser.add_argument("-h", "--help", action=_Record, nargs=0)
    return parser


def reset(layout, settings, input_stream=None):
    """Ask for confirmation, then empty the asset directories and reset settings.

    Returns True if the reset was carried out. End of input cancels.
    """
    stream = input_stream if input_stream is not None else sys.stdin
    while True:
        user_prompt("Are you sure? (y/n)")
        answer = stream.read(1)
        if answer == "":
            answer = "n"
        if answer in "yYnN":
            break
        user_error("Please enter 'y' or 'n'")

    if answer in "yY":
        user_info("Resetting all directories...")
        for directory in (layout.audio_dir, layout.ascii_dir, layout.frames_dir):
            empty_directory(directory)
        settings.reset_defaults()
        user_success("Reset completed successfully!")
        return True
    user_response("Operation cancelled.")
    return False


def _print_fatal(message):
    sys.stderr.write(f"{Ansi.RED.value}Fatal: {message}{Ansi.RESET.value}\n")
    sys.stderr.flush()


def _positive_int(value, invalid_message):
    if not is_valid_integer(value):
        raise _UserFatal(invalid_message)
    return int(value)


def _apply(option, value, settings):
    if option == "input":
        settings.video_path = value
    elif option == "fps":
        fps = _positive_int(value, "Invalid fps value. Must be a positive integer.")
        if not 1 <= fps <= 60:
            raise _UserFatal("FPS must be between 1 and 60.")
        settings.fps = fps
    elif option == "width":
        width = _positive_int(value, "Invalid width value. Must be a positive integer.")
        if width <= 0:
            raise _UserFatal("Width must be positive.")
        settings.width = width
    elif option == "height":
        settings.height = _positive_int(
            value, "Invalid height value. Must be a positive integer."
        )
    elif option == "start":
        if not is_valid_timestamp(value):
            raise _UserFatal("Invalid start time. Format must be HH:MM:SS")
        settings.start_time = value
    elif option == "duration":
        settings.duration = _positive_int(
            value, "Invalid duration. Must be a positive integer in seconds."
        )


def _run(actions, settings, layout, program):
    options_given = 0
    for option, value in actions:
        if option == "reset":
            user_warning("This will delete all extracted files and reset settings.")
            reset(layout, settings)
            return 0
        if option == "play":
            settings.video_name = value
            play(layout, settings.video_name, settings.fps)
            return 0
        if option == "help":
            user_error(usage_message(program))
            return 0
        _apply(option, value, settings)
        options_given += 1

    if options_given:
        settings.video_name = video_name_from_path(settings.video_path)
        setup(settings, layout)
    play(layout, settings.video_name, settings.fps)
    return 0


def _invalid_option(program):
    user_error("Invalid option provided.")
    user_error(usage_message(program))
    return 1


def main(argv=None):
    """Run the command line and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else _PROGRAM
    parser = build_parser(program)
    try:
        namespace, extras = parser.parse_known_args(args)
    except argparse.ArgumentError:
        return _invalid_option(program)
    if any(extra.startswith("-") and extra != "-" for extra in extras):
        return _invalid_option(program)

    try:
        return _run(namespace.actions or [], Settings(), AssetLayout(), program)
    except (_UserFatal, PlaybackError, VideoNotFoundError) as exc:
        _print_fatal(str(exc))
        return 1
    except FatalError:
        return 1


if __name__ == "__main__":
    sys.exit(main())