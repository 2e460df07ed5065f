"""Extract videos as ASCII art frames with ffmpeg and jp2a and play them in the terminal with audio."""

__version__ = "0.1.0"