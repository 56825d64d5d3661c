"""Roof plane construction for each supported roof type.

All builders share one frame: the footprint spans x in [0, width] and
z in [0, depth], eaves sit at `base` and every footprint edge is pushed
out by the overhang before slopes are laid out. Ridge height is always
(depth / 2) * pitch.
"""

from __future__ import annotations

from modelgen.models import RoofPlane, RoofType, p3

HIP_RIDGE_INSET = 0.25        # Fraction of width the ridge stops short of each end
GAMBREL_BREAK_HEIGHT = 0.6    # Fraction of ridge height at the slope break
GAMBREL_BREAK_DEPTH = 0.2     # Fraction of depth from each eave to the break
MANSARD_CAP_HEIGHT = 0.7      # Fraction of ridge height at the flat cap
MANSARD_INSET = 0.15          # Fraction of depth the cap is inset
FLAT_PARAPET = 0.5            # Feet above the top plate


def ridge_height(depth: float, pitch: float) -> float:
    return (depth / 2) * pitch


def gable(width: float, depth: float, base: float, pitch: float, oh: float) -> list[RoofPlane]:
    top = base + ridge_height(depth, pitch)
    mid = depth / 2
    return [
        RoofPlane(id="roof-front", overhang=oh, vertices=(
            p3(-oh, base, -oh), p3(width + oh, base, -oh),
            p3(width + oh, top, mid), p3(-oh, top, mid),
        )),
        RoofPlane(id="roof-back", overhang=oh, vertices=(
            p3(width + oh, base, depth + oh), p3(-oh, base, depth + oh),
            p3(-oh, top, mid), p3(width + oh, top, mid),
        )),
    ]


def hip(width: float, depth: float, base: float, pitch: float, oh: float) -> list[RoofPlane]:
    top = base + ridge_height(depth, pitch)
    mid = depth / 2
    inset = width * HIP_RIDGE_INSET
    return [
        RoofPlane(id="roof-hip-front", overhang=oh, vertices=(
            p3(-oh, base, -oh), p3(width + oh, base, -oh),
            p3(width - inset, top, mid), p3(inset, top, mid),
        )),
        RoofPlane(id="roof-hip-back", overhang=oh, vertices=(
            p3(width + oh, base, depth + oh), p3(-oh, base, depth + oh),
            p3(inset, top, mid), p3(width - inset, top, mid),
        )),
        RoofPlane(id="roof-hip-left", overhang=oh, vertices=(
            p3(-oh, base, depth + oh), p3(-oh, base, -oh), p3(inset, top, mid),
        )),
        RoofPlane(id="roof-hip-right", overhang=oh, vertices=(
            p3(width + oh, base, -oh), p3(width + oh, base, depth + oh), p3(width - inset, top, mid),
        )),
    ]


def flat(width: float, depth: float, base: float, pitch: float, oh: float) -> list[RoofPlane]:
    y = base + FLAT_PARAPET
    return [
        RoofPlane(id="roof-flat", overhang=oh, vertices=(
            p3(-oh, y, -oh), p3(width + oh, y, -oh),
            p3(width + oh, y, depth + oh), p3(-oh, y, depth + oh),
        )),
    ]


def shed(width: float, depth: float, base: float, pitch: float, oh: float) -> list[RoofPlane]:
    """Single slope, high along the front eave and low along the back."""
    top = base + ridge_height(depth, pitch)
    return [
        RoofPlane(id="roof-shed", overhang=oh, vertices=(
            p3(-oh, top, -oh), p3(width + oh, top, -oh),
            p3(width + oh, base, depth + oh), p3(-oh, base, depth + oh),
        )),
    ]


def gambrel(width: float, depth: float, base: float, pitch: float, oh: float) -> list[RoofPlane]:
    rise = ridge_height(depth, pitch)
    top = base + rise
    knee = base + rise * GAMBREL_BREAK_HEIGHT
    front_break = depth * GAMBREL_BREAK_DEPTH
    back_break = depth - front_break
    mid = depth / 2
    left, right = -oh, width + oh
    return [
        RoofPlane(id="roof-gambrel-fl", overhang=oh, vertices=(
            p3(left, base, -oh), p3(right, base, -oh),
            p3(right, knee, front_break), p3(left, knee, front_break),
        )),
        RoofPlane(id="roof-gambrel-fu", overhang=oh, vertices=(
            p3(left, knee, front_break), p3(right, knee, front_break),
            p3(right, top, mid), p3(left, top, mid),
        )),
        RoofPlane(id="roof-gambrel-bl", overhang=oh, vertices=(
            p3(right, base, depth + oh), p3(left, base, depth + oh),
            p3(left, knee, back_break), p3(right, knee, back_break),
        )),
        RoofPlane(id="roof-gambrel-bu", overhang=oh, vertices=(
            p3(right, knee, back_break), p3(left, knee, back_break),
            p3(left, top, mid), p3(right, top, mid),
        )),
    ]


def mansard(width: float, depth: float, base: float, pitch: float, oh: float) -> list[RoofPlane]:
    cap = base + ridge_height(depth, pitch) * MANSARD_CAP_HEIGHT
    inset = depth * MANSARD_INSET
    left, right = -oh + inset, width + oh - inset
    return [
        RoofPlane(id="roof-mansard-f", overhang=oh, vertices=(
            p3(-oh, base, -oh), p3(width + oh, base, -oh),
            p3(right, cap, inset), p3(left, cap, inset),
        )),
        RoofPlane(id="roof-mansard-b", overhang=oh, vertices=(
            p3(width + oh, base, depth + oh), p3(-oh, base, depth + oh),
            p3(left, cap, depth - inset), p3(right, cap, depth - inset),
        )),
        RoofPlane(id="roof-mansard-top", overhang=0, vertices=(
            p3(left, cap, inset), p3(right, cap, inset),
            p3(right, cap, depth - inset), p3(left, cap, depth - inset),
        )),
    ]


def build_roof(
    roof_type: RoofType,
    width: float,
    depth: float,
    base: float,
    pitch: float,
    overhang: float,
) -> list[RoofPlane]:
    match roof_type:
        case RoofType.GABLE:
            builder = gable
        case RoofType.HIP:
            builder = hip
        case RoofType.FLAT:
            builder = flat
        case RoofType.SHED:
            builder = shed
        case RoofType.GAMBREL:
            builder = gambrel
        case RoofType.MANSARD:
            builder = mansard
        case _:
            builder = gable
    return builder(width, depth, base, pitch, overhang)
