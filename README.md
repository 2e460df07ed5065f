# asciireel

Convert a video into ASCII art frames and play it back in your terminal,
with the audio track playing alongside.

## Requirements

asciireel drives external tools, which must be installed:

- `ffmpeg` (on your `PATH`) to extract the audio track and grayscale frames
- `jp2a` (on your `PATH`) to turn each frame into ASCII art
- an audio player in `/usr/bin`, the first found of `ffplay`, `mpv`,
  `mplayer`, `vlc` and `aplay`; without one, the frames play silently

## Installation

```
pip install .
```

## Usage

Convert and play a new video:

```
asciireel -i video.mp4
```

Start at 1:30 and take 10 seconds:

```
asciireel -i video.mp4 -s 00:01:30 -d 10
```

Play a video you converted earlier, by its file name without directory or
extension:

```
asciireel -p video
```

Delete every extracted file (you are asked to confirm with `y` or `n`;
end of input cancels):

```
asciireel -r
```

Run with no options, `asciireel` plays the video named `rr` from the
existing assets.

### Options

| Option | Meaning | Default |
| --- | --- | --- |
| `-i, --input FILE` | Video file to process | |
| `-f, --fps N` | Frames per second, 1 to 60 | 10 |
| `-w, --width N` | Width of the extracted frames, positive | 900 |
| `-t, --height N` | Height; checked to be a number, frames are scaled by width only | 600 |
| `-s, --start TIME` | Start time, `HH:MM:SS` (hours 00–23) | 00:00:00 |
| `-d, --duration SEC` | Seconds to extract, 0 for the whole video | 0 |
| `-p, --play NAME` | Play a previously converted video | |
| `-r, --reset` | Empty the asset directories | |
| `-h, --help` | Show help | |

Options are handled in the order given. `-p`, `-r` and `-h` act at once
and end the run, so options before them still apply (for example
`asciireel -f 20 -p video`). Otherwise, if any option was given, the video
from `-i` is extracted and then played. An invalid value or unknown option
prints a message and the command exits with status 1.

Extracted assets are kept under `assets/` in the current directory:
`assets/audio` (one MP3 per video), `assets/frames` (grayscale PNGs) and
`assets/ascii` (text frames, played in natural number order).

Messages for the user are printed in colour. Internal failures, such as a
tool that fails or a directory that cannot be created, are also appended
without colour, with a timestamp and location, to `err.log` in the current
directory.

## Using it as a library

- `asciireel.config`: `Settings`, `AssetLayout`, `video_name_from_path`,
  `usage_message`
- `asciireel.extract`: `audio_command`, `frames_command`, `ascii_command`,
  `extract_audio`, `extract_frames`, `convert_to_ascii`, `setup`;
  failures raise `ExtractionError` or `VideoNotFoundError`
- `asciireel.player`: `find_available_player`, `audio_player_command`,
  `natural_sort_key`, `list_frames`, `draw_ascii_frame`, `draw_frames`,
  `video_extracted`, `play`; failures raise `PlaybackError`
- `asciireel.spinner.Spinner`: a terminal spinner, usable as a context
  manager, that ends with a check mark or a cross
- `asciireel.validation`: `is_valid_integer`, `is_valid_timestamp`
- `asciireel.fsutil`: `create_dir`, `empty_directory`, `is_directory_empty`,
  `directory_exists`, `dir_contains`
- `asciireel.errors`: `log_error`, `FatalError` and the `user_*` message
  helpers
- `asciireel.colors`: the `Ansi` escape codes and `colorize`

## What it does not do

asciireel does not decode video or render images itself: all decoding and
ASCII rendering is done by `ffmpeg` and `jp2a`, and sound by an external
player. It has no seeking, pausing or volume control during playback, and
frames are written to the terminal as they are, without resizing to the
window.