"""Plan analysis — defaults missing values and derives the footprint."""

from __future__ import annotations
import logging
import math
from typing import Callable

from modelgen.models import (
    ArchitecturalStyle, Footprint, GenerationConfig, GenerationWarning,
    PlanDescription, ResolvedPlan, RoofType, WarningCode,
)
from modelgen.core.parsing import has_feature
from modelgen.core.styles import pitch_for

logger = logging.getLogger(__name__)

MAX_STORIES = 3
DEFAULT_SQUARE_FOOTAGE = 2000.0
DEFAULT_STYLE = ArchitecturalStyle.MODERN_FARMHOUSE

# Height profiles by story count (feet, ground story first)
STORY_HEIGHTS: dict[int, tuple[float, ...]] = {
    1: (9.5,),
    2: (9.5, 8.5),
    3: (9.5, 9.0, 8.5),
}

GARAGE_PATTERN = r"garage"
DECK_PATTERN = r"deck|patio"
PORCH_PATTERN = r"porch"


def footprint_for(total_square_footage: float, stories: int, aspect_ratio: float = 1.5) -> Footprint:
    """Split the area evenly per story at a fixed width:depth ratio."""
    per_story = total_square_footage / max(stories, 1)
    depth = math.sqrt(per_story / aspect_ratio)
    return Footprint(width=per_story / depth, depth=depth)


class PlanAnalyzer:
    """Resolves a raw plan into the values every generation rule reads."""

    def analyze(
        self, plan: PlanDescription, config: GenerationConfig,
    ) -> tuple[ResolvedPlan, list[GenerationWarning]]:
        warnings: list[GenerationWarning] = []

        def warn(code: WarningCode, message: str, subject: str) -> None:
            logger.warning("%s: %s", code.value, message)
            warnings.append(GenerationWarning(code=code, message=message, subject=subject))

        stories = self._resolve_stories(plan.stories, warn)
        sqft = plan.total_square_footage
        if sqft is None or not math.isfinite(sqft) or sqft <= 0:
            warn(
                WarningCode.SQUARE_FOOTAGE_DEFAULTED,
                f"Square footage {sqft!r} is unusable; assuming {DEFAULT_SQUARE_FOOTAGE:g}",
                "total_square_footage",
            )
            sqft = DEFAULT_SQUARE_FOOTAGE

        if plan.architectural_style is None:
            style: ArchitecturalStyle | None = DEFAULT_STYLE
            style_name = DEFAULT_STYLE.value
        else:
            style = ArchitecturalStyle.parse(plan.architectural_style)
            style_name = style.value if style else plan.architectural_style
            if style is None:
                warn(
                    WarningCode.STYLE_UNRECOGNIZED,
                    f"Unrecognized style {plan.architectural_style!r}; using default pitch",
                    "architectural_style",
                )

        roof_type = RoofType.parse(plan.roof_type)
        if roof_type is None:
            if plan.roof_type is not None:
                warn(
                    WarningCode.ROOF_TYPE_DEFAULTED,
                    f"Unsupported roof type {plan.roof_type!r}; falling back to gable",
                    "roof_type",
                )
            roof_type = RoofType.GABLE

        features = plan.special_features
        has_garage = has_feature(features, GARAGE_PATTERN)
        resolved = ResolvedPlan(
            stories=stories,
            total_square_footage=sqft,
            style_name=style_name,
            style=style,
            roof_type=roof_type,
            pitch=pitch_for(style),
            overhang=config.wet_climate_overhang if plan.wet_climate else config.default_overhang,
            story_heights=STORY_HEIGHTS[stories],
            footprint=footprint_for(sqft, stories, config.aspect_ratio),
            has_garage=has_garage,
            has_deck=has_feature(features, DECK_PATTERN),
            has_porch=has_feature(features, PORCH_PATTERN),
            garage_bay_width=config.garage_bay_width if has_garage else 0.0,
        )
        logger.debug(
            "Resolved plan: %d stories, %.0f sqft, footprint %.2f x %.2f ft, %s roof",
            resolved.stories, resolved.total_square_footage,
            resolved.footprint.width, resolved.footprint.depth, resolved.roof_type.value,
        )
        return resolved, warnings

    def _resolve_stories(
        self, stories: int | None, warn: Callable[[WarningCode, str, str], None],
    ) -> int:
        if stories is None:
            return 1
        if stories < 1:
            warn(WarningCode.STORIES_CLAMPED, f"{stories} stories requested; generating 1", "stories")
            return 1
        if stories > MAX_STORIES:
            warn(
                WarningCode.STORIES_CLAMPED,
                f"{stories} stories requested; generating {MAX_STORIES}",
                "stories",
            )
            return MAX_STORIES
        return stories
