"""Opening placement shared by the wall rules."""

from __future__ import annotations
import math

from modelgen.models import OpeningType, WallOpening

# Windows keep at least this normalized distance from any door center.
DOOR_CLEARANCE = 0.08

DOOR_HEIGHT = 6.67
MAX_WINDOWS_PER_WALL = 48


def fits(existing: list[WallOpening], candidate: WallOpening, wall_length: float) -> bool:
    """True if the candidate lies on the wall and clears every existing opening."""
    start, end = candidate.span(wall_length)
    if start < 0 or end > 1:
        return False
    for other in existing:
        if (
            candidate.type == OpeningType.WINDOW
            and other.type == OpeningType.DOOR
            and abs(candidate.position - other.position) <= DOOR_CLEARANCE
        ):
            return False
        other_start, other_end = other.span(wall_length)
        if start < other_end and other_start < end:
            return False
    return True


def window_count(wall_length: float, spacing: float) -> int:
    """One window per `spacing` feet, at least two and at most MAX_WINDOWS_PER_WALL."""
    return min(MAX_WINDOWS_PER_WALL, max(2, math.floor(wall_length / spacing)))


def evenly_spaced(count: int) -> list[float]:
    """Fractions (i + 1) / (count + 1), i.e. interior points of `count` equal gaps."""
    return [(i + 1) / (count + 1) for i in range(count)]


def layout_openings(
    doors: list[WallOpening],
    windows: list[WallOpening],
    wall_length: float,
) -> tuple[WallOpening, ...]:
    """Place doors, then windows; any candidate that would collide is skipped.

    Windows arrive in position order, so each only needs checking against
    the doors and the last window placed before it.
    """
    placed_doors: list[WallOpening] = []
    for candidate in doors:
        if fits(placed_doors, candidate, wall_length):
            placed_doors.append(candidate)

    placed_windows: list[WallOpening] = []
    for candidate in sorted(windows, key=lambda o: o.position):
        neighbours = placed_doors + placed_windows[-1:]
        if fits(neighbours, candidate, wall_length):
            placed_windows.append(candidate)
    return tuple(placed_doors + placed_windows)


def door(position: float, width: float, height: float = DOOR_HEIGHT) -> WallOpening:
    return WallOpening(
        type=OpeningType.DOOR, position=position,
        width=width, height=height, sill_height=0,
    )


def window(position: float, width: float, height: float, sill_height: float) -> WallOpening:
    return WallOpening(
        type=OpeningType.WINDOW, position=position,
        width=width, height=height, sill_height=sill_height,
    )
