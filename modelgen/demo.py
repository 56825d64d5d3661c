"""The demo plan shown when no document has been analyzed yet."""

from modelgen.models import PlanDescription, RegionalStyle, RoomSpec

DEMO_PLAN = PlanDescription(
    stories=2,
    total_square_footage=3200,
    architectural_style="modern_farmhouse",
    roof_type="gable",
    regional_style=RegionalStyle(
        is_pnw=True,
        description="Pacific Northwest modern farmhouse with deep overhangs",
    ),
    rooms=(
        RoomSpec(name="Great Room", dimensions="24' x 18'", ceiling_height="Vaulted to 18'", notes="Open to kitchen"),
        RoomSpec(name="Kitchen", dimensions="16' x 14'", ceiling_height="10'", notes='42" shaker cabinets'),
        RoomSpec(name="Primary Suite", dimensions="18' x 16'", ceiling_height="10'", notes="Spa bath"),
        RoomSpec(name="Bedroom 2", dimensions="14' x 12'", ceiling_height="9'", notes="Walk-in closet"),
        RoomSpec(name="Bedroom 3", dimensions="13' x 12'", ceiling_height="9'", notes="Jack & Jill bath"),
        RoomSpec(name="Bedroom 4 / Bonus", dimensions="16' x 14'", ceiling_height="8'", notes="Above garage"),
        RoomSpec(name="Garage", dimensions="34' x 24'", ceiling_height="10'", notes="3-car, EV ready"),
    ),
    special_features=(
        "attached_garage_3_car", "covered_front_porch", "rear_deck",
        "mudroom", "walk_in_pantry", "bonus_room",
    ),
)
