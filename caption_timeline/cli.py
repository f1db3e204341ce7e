"""Command-line interface for Caption Timeline.

WHY: Users need a quick way to check how a transcript will be captioned,
either "what is on screen at this instant?" or "give me the caption
groups as files", without wiring up a renderer.

HOW: Uses argparse to accept a transcript JSON file plus grouping and
presentation options. With --at-ms or --frame the CLI runs one engine
query and prints the rendered caption as JSON on stdout (``null`` when
nothing is shown). Otherwise it runs the selected exporters and saves
their files next to the input (or to --output-dir).

RULES:
- Positional argument: transcript JSON file (word list or captions)
- --captions: treat a bare list as phrase captions to expand into words
- --at-ms and --frame are mutually exclusive; --frame uses --fps
- --formats: comma-separated exporter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts
- Status output goes to stderr; query JSON goes to stdout
- Exit code 1 on any input error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from caption_timeline.adapters.transcript_adapter import load_transcript_file
from caption_timeline.config import (
    DEFAULT_ALIGNMENT,
    DEFAULT_FPS,
    DEFAULT_PRESET,
    DEFAULT_STYLE,
    MAX_GROUP_WORDS,
    PAUSE_THRESHOLD_MS,
)
from caption_timeline.core.clock import frame_to_ms
from caption_timeline.core.grouping import GroupingPolicy
from caption_timeline.engine import CaptionTimelineEngine
from caption_timeline.formatters import FORMATTERS
from caption_timeline.formatters.base import FormatterOutput
from caption_timeline.styles import Alignment, Preset, StylePolicy


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. narration-captions.srt)
    - Conflict: counter inserted before the extension, starting at 2
      (e.g. narration-captions-2.srt)
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")
    return path


def _parse_format_keys(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(FORMATTERS.keys())
    keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            _fail("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            ))
    return keys


def _run_query(engine: CaptionTimelineEngine, args: argparse.Namespace) -> None:
    """Print the rendered caption at one instant as JSON."""
    if args.frame is not None:
        time_ms = frame_to_ms(args.frame, args.fps)
    else:
        time_ms = args.at_ms

    caption = engine.query(time_ms, args.style, args.alignment, args.preset)
    result = {
        "time_ms": time_ms,
        "caption": None if caption is None else caption.to_dict(),
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))


def _run_export(
    engine: CaptionTimelineEngine,
    args: argparse.Namespace,
    input_path: Path,
) -> None:
    format_keys = _parse_format_keys(args.formats)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    _status("Exporting {} caption groups...".format(len(engine.groups)))
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(engine.groups):
            saved_path = _save_output(output, input_path.stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def run(args: argparse.Namespace) -> None:
    """Load the transcript, build the engine, and run query or export mode."""
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    try:
        policy = GroupingPolicy(
            max_words=args.max_words,
            pause_threshold_ms=args.pause_threshold_ms,
        )
        words = load_transcript_file(input_path, captions=args.captions)
        engine = CaptionTimelineEngine(words, policy)
    except ValueError as e:
        # Invalid timings, bad payloads, and bad grouping limits
        _fail(str(e))
    except OSError as e:
        _fail("Cannot read {}: {}".format(input_path, e))

    _status("Loaded {} words into {} caption groups".format(
        len(engine.words), len(engine.groups)
    ))

    if args.at_ms is not None or args.frame is not None:
        try:
            _run_query(engine, args)
        except ValueError as e:
            _fail(str(e))
    else:
        _run_export(engine, args, input_path)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser without
    running anything.
    """
    parser = argparse.ArgumentParser(
        prog="caption_timeline",
        description="Group word-level transcript timings into short captions "
                    "and render them at a playback time or export them.",
    )

    parser.add_argument(
        "input_file",
        help="Path to a transcript JSON file (word list, {\"words\": [...]}, "
             "or {\"captions\": [...]}).",
    )

    parser.add_argument(
        "--captions",
        action="store_true",
        help="Treat a bare list as phrase captions and split them into words.",
    )

    when = parser.add_mutually_exclusive_group()
    when.add_argument(
        "--at-ms",
        type=float,
        default=None,
        help="Render the caption shown at this playback time (milliseconds).",
    )
    when.add_argument(
        "--frame",
        type=int,
        default=None,
        help="Render the caption shown at this frame index (uses --fps).",
    )

    parser.add_argument(
        "--fps",
        type=float,
        default=DEFAULT_FPS,
        help="Frame rate used with --frame (default: %(default)s).",
    )

    parser.add_argument(
        "--style",
        default=DEFAULT_STYLE,
        help="Caption style: {} (default: %(default)s).".format(
            ", ".join(s.value for s in StylePolicy)
        ),
    )

    parser.add_argument(
        "--alignment",
        default=DEFAULT_ALIGNMENT,
        choices=[a.value for a in Alignment],
        help="Vertical caption alignment (default: %(default)s).",
    )

    parser.add_argument(
        "--preset",
        default=DEFAULT_PRESET,
        choices=[p.value for p in Preset],
        help="Visual caption preset (default: %(default)s).",
    )

    parser.add_argument(
        "--max-words",
        type=int,
        default=MAX_GROUP_WORDS,
        help="Maximum words per caption group (default: %(default)s).",
    )

    parser.add_argument(
        "--pause-threshold-ms",
        type=float,
        default=PAUSE_THRESHOLD_MS,
        help="Gap (ms) before a word that starts a new group (default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of export formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save exported files (default: same as input file).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m caption_timeline`` and the console script.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()
