"""Roof over the top story."""

from __future__ import annotations
import logging

from modelgen.rules.base import GenerationRule
from modelgen.rules.roof.planes import build_roof
from modelgen.models import GenerationContext

logger = logging.getLogger(__name__)


class RoofRule(GenerationRule):

    priority = 60

    def get_id(self) -> str:
        return "roof.planes"

    def get_name(self) -> str:
        return "Roof Planes"

    def apply(self, context: GenerationContext) -> None:
        resolved = context.resolved
        planes = build_roof(
            resolved.roof_type,
            resolved.footprint.width,
            resolved.footprint.depth,
            resolved.roof_base_height,
            resolved.pitch,
            resolved.overhang,
        )
        logger.debug(
            "%s roof: %d planes, pitch %.3f, overhang %.1f ft",
            resolved.roof_type.value, len(planes), resolved.pitch, resolved.overhang,
        )
        context.add_roof_planes(planes)
