"""
Zoom Timeline Preview Tool

Entry point for previewing camera zoom transitions. Segments and optional
cursor samples are given on the command line; the tool prints the zoom state
at a single instant, or samples a whole timeline and optionally saves it to
CSV.

Usage:
    zoomkit --segment 2:4:2:0.5,0.5 --segment 4.75:6:4 --time 5.25
    zoomkit --segment 2:4:2 --cursor-sample 2100:0.2:0.3 --fps 10 --csv out.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from zoomkit.config import reload_settings
from zoomkit.cursor import CursorTrack
from zoomkit.domain import AutoMode, CursorMoveEvent, ManualMode, ZoomSegment
from zoomkit.interpolation import ZoomInterpolator
from zoomkit.segments import SegmentValidationError, validate_segments
from zoomkit.utils import configure_logging, get_logger
from zoomkit.utils.timeline_utils import (
    build_zoom_timeline,
    print_zoom_timeline,
    save_zoom_timeline_to_csv,
)

logger: logging.Logger = get_logger("zoomkit")


def parse_segment(value: str) -> ZoomSegment:
    """Parses ``START:END:AMOUNT[:X,Y]``; without a focus the segment is auto."""
    parts = value.split(":")
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(
            f"Expected START:END:AMOUNT[:X,Y], got {value!r}."
        )
    try:
        start, end, amount = (float(part) for part in parts[:3])
        if len(parts) == 4:
            x, y = (float(coord) for coord in parts[3].split(","))
            mode = ManualMode(x, y)
        else:
            mode = AutoMode()
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid segment {value!r}: {err}") from err
    return ZoomSegment(start=start, end=end, amount=amount, mode=mode)


def parse_cursor_sample(value: str) -> CursorMoveEvent:
    """Parses ``TIME_MS:X:Y``."""
    parts = value.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"Expected TIME_MS:X:Y, got {value!r}.")
    try:
        time_ms, x, y = (float(part) for part in parts)
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"Invalid cursor sample {value!r}: {err}"
        ) from err
    return CursorMoveEvent(time_ms, x, y)


def _build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="zoomkit", description="Camera zoom timeline preview tool"
    )
    parser.add_argument(
        "--segment",
        dest="segments",
        action="append",
        type=parse_segment,
        default=[],
        help="Zoom segment as START:END:AMOUNT[:X,Y] (repeatable)",
    )
    parser.add_argument(
        "--cursor-sample",
        dest="cursor_samples",
        action="append",
        type=parse_cursor_sample,
        default=[],
        help="Cursor sample as TIME_MS:X:Y (repeatable)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--time",
        type=float,
        help="Print the zoom state at this time in seconds",
    )
    mode.add_argument(
        "--fps",
        type=float,
        help="Sample the whole timeline at this frame rate",
    )
    parser.add_argument(
        "--duration",
        type=float,
        help="Timeline length in seconds when sampling",
    )
    parser.add_argument(
        "--csv",
        type=str,
        help="Save the sampled timeline to this CSV file",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Sort the segments and reject overlapping or malformed ones",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level (defaults to LOG_LEVEL or INFO)",
    )
    return parser


def main() -> None:
    """
    Main function to handle the command line interface logic.
    """
    args: argparse.Namespace = _build_parser().parse_args()
    if args.log_level:
        configure_logging(args.log_level)

    segments: list[ZoomSegment] | tuple[ZoomSegment, ...] = args.segments
    if args.validate:
        try:
            segments = validate_segments(segments)
        except SegmentValidationError as err:
            logger.error("Invalid zoom segments: %s", err)
            sys.exit(1)

    track = CursorTrack(args.cursor_samples) if args.cursor_samples else None

    try:
        interpolator = ZoomInterpolator(reload_settings())
    except ValueError as err:
        logger.error("Invalid zoom settings: %s", err)
        sys.exit(1)

    if args.time is not None:
        zoom = interpolator.at(args.time, segments, track)
        bounds = zoom.bounds
        print(
            f"t={zoom.t:.4f} amount={zoom.display_amount:.4f} "
            f"bounds=({bounds.top_left.x:.4f}, {bounds.top_left.y:.4f}) -> "
            f"({bounds.bottom_right.x:.4f}, {bounds.bottom_right.y:.4f})"
        )
        sys.exit(0)

    fps: float = args.fps if args.fps is not None else interpolator.settings.preview_fps
    start_time: float = time.time()
    try:
        timeline = build_zoom_timeline(
            segments,
            track,
            fps=fps,
            duration=args.duration,
            interpolator=interpolator,
        )
    except ValueError as err:
        logger.error("Failed to sample zoom timeline: %s", err)
        sys.exit(1)
    print_zoom_timeline(timeline)

    if args.csv:
        save_zoom_timeline_to_csv(timeline, args.csv)

    logger.info("Zoom timeline sampled in %.2f seconds", time.time() - start_time)


if __name__ == "__main__":
    main()
