"""Group-structure checks for quarter-turn matrices."""

from .quarter_turns import QuarterTurnGroup, build_compose_table

__all__ = ["QuarterTurnGroup", "build_compose_table"]
