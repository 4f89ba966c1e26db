"""Behavior tests for zoom timeline sampling and export."""

import csv

import pytest

from zoomkit.domain import ManualMode, SegmentBounds, ZoomSegment
from zoomkit.interpolation import ZoomInterpolator
from zoomkit.utils.timeline_utils import (
    CSV_HEADER,
    build_zoom_timeline,
    print_zoom_timeline,
    save_zoom_timeline_to_csv,
)

SEGMENTS = [ZoomSegment(1.0, 2.0, 2.0, ManualMode(0.5, 0.5))]


def test_build_zoom_timeline_samples_every_frame(
    linear_interpolator: ZoomInterpolator,
) -> None:
    """Default duration covers the last zoom-out transition."""
    timeline = build_zoom_timeline(SEGMENTS, fps=2.0, interpolator=linear_interpolator)

    assert [entry.timestamp_seconds for entry in timeline] == pytest.approx(
        [0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0]
    )
    indexed = {round(entry.timestamp_seconds, 3): entry for entry in timeline}
    assert indexed[0.0].t == 0.0
    assert indexed[0.0].bounds == SegmentBounds.default()
    assert indexed[1.5].t == pytest.approx(0.5)
    assert indexed[1.5].display_amount == pytest.approx(1.5)
    assert indexed[2.0].display_amount == pytest.approx(2.0)
    assert indexed[2.5].t == pytest.approx(0.5)
    assert indexed[3.0].t == pytest.approx(0.0)


def test_build_zoom_timeline_respects_explicit_duration(
    linear_interpolator: ZoomInterpolator,
) -> None:
    timeline = build_zoom_timeline(
        SEGMENTS, fps=10.0, duration=0.5, interpolator=linear_interpolator
    )

    assert len(timeline) == 6
    assert all(entry.t == 0.0 for entry in timeline)


def test_build_zoom_timeline_without_segments_has_one_transition_of_frames() -> None:
    timeline = build_zoom_timeline([], fps=4.0)

    assert len(timeline) == 5
    assert all(entry.bounds == SegmentBounds.default() for entry in timeline)


@pytest.mark.parametrize("fps", [0.0, -24.0, float("inf"), float("nan")])
def test_build_zoom_timeline_rejects_unusable_fps(fps: float) -> None:
    with pytest.raises(ValueError, match="fps"):
        build_zoom_timeline(SEGMENTS, fps=fps)


@pytest.mark.parametrize("duration", [-1.0, float("inf"), float("nan")])
def test_build_zoom_timeline_rejects_unusable_duration(duration: float) -> None:
    with pytest.raises(ValueError, match="duration"):
        build_zoom_timeline(SEGMENTS, fps=10.0, duration=duration)


def test_build_zoom_timeline_rejects_unbounded_default_duration() -> None:
    """An open-ended segment leaves no finite timeline to sample."""
    segments = [ZoomSegment(1.0, float("inf"), 2.0, ManualMode(0.5, 0.5))]

    with pytest.raises(ValueError, match="duration"):
        build_zoom_timeline(segments, fps=10.0)


def test_save_zoom_timeline_to_csv_writes_header_and_rows(
    tmp_path, linear_interpolator: ZoomInterpolator
) -> None:
    timeline = build_zoom_timeline(SEGMENTS, fps=2.0, interpolator=linear_interpolator)

    path = save_zoom_timeline_to_csv(timeline, tmp_path / "out" / "zoom.csv")

    with path.open(encoding="utf-8", newline="") as file:
        rows = list(csv.reader(file))
    assert rows[0] == CSV_HEADER
    assert len(rows) == len(timeline) + 1
    assert rows[4] == ["1.5", "0.5", "1.5", "-0.25", "-0.25", "1.25", "1.25"]


def test_print_zoom_timeline_lists_every_frame(
    capsys: pytest.CaptureFixture[str], linear_interpolator: ZoomInterpolator
) -> None:
    timeline = build_zoom_timeline(SEGMENTS, fps=2.0, interpolator=linear_interpolator)

    print_zoom_timeline(timeline)

    output = capsys.readouterr().out
    assert "Progress" in output
    assert "1.500s" in output
    assert "1.500x" in output
    assert len(output.strip().splitlines()) == len(timeline) + 1
