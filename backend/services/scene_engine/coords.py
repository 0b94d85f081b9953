"""Plan-space to world-space coordinate mapping."""

from dataclasses import dataclass
from typing import Tuple

from config import PLAN_ORIGIN_X, PLAN_ORIGIN_Y
from .plan import Point2D


@dataclass(frozen=True)
class PlanOrigin:
    """Plan-space point that lands on the world origin (the canvas center)."""

    x: float = 400.0
    y: float = 300.0


DEFAULT_ORIGIN = PlanOrigin(PLAN_ORIGIN_X, PLAN_ORIGIN_Y)


def to_world(point: Point2D, scale: float,
             origin: PlanOrigin = DEFAULT_ORIGIN) -> Tuple[float, float]:
    """
    Map a plan-space point to world ``(x, z)``.

    ``scale`` is plan units per world unit and must be positive; the
    ``FloorPlan`` record enforces that before this is ever reached.
    """
    return ((point.x - origin.x) / scale, (point.y - origin.y) / scale)
