"""Stroke parameter types.

A stroke profile describes, for one contour, how wide the stroke is on each
side at every segment boundary, and how its ends and corners are shaped.
"""

from dataclasses import dataclass
from enum import Enum, auto

from ufostroker.config.settings import CapType, JoinType


class InterpolationType(Enum):
    """How handle values vary between two segment boundaries.

    - NULL: The value of the starting handle holds for the whole segment
    - LINEAR: Values are interpolated linearly along the segment parameter
    """

    NULL = auto()
    LINEAR = auto()


@dataclass(frozen=True, slots=True)
class StrokeHandle:
    """Stroke parameters at one segment boundary.

    Attributes:
        left_offset: Distance from the path on its left side
        right_offset: Distance from the path on its right side
        tangent_offset: Rotation of the offset direction, in radians
        interpolation: How values vary towards the next handle
    """

    left_offset: float
    right_offset: float
    tangent_offset: float = 0.0
    interpolation: InterpolationType = InterpolationType.LINEAR


@dataclass(frozen=True)
class StrokeProfile:
    """Full stroke description for one open contour.

    Attributes:
        handles: One handle per segment boundary (segment count + 1)
        cap_start: Cap style at the start of the contour
        cap_end: Cap style at the end of the contour
        join: Join style at corners between segments
    """

    handles: tuple[StrokeHandle, ...]
    cap_start: CapType = CapType.ROUND
    cap_end: CapType = CapType.ROUND
    join: JoinType = JoinType.ROUND
