"""
Planar geometry for landmark tracings.

Coordinates are image pixels; distances are in the same (relative) units
unless the caller pre-scales the landmarks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Union

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Landmark2D:
    """Point in image-pixel space."""
    x: float
    y: float

    @classmethod
    def coerce(cls, value: Union[Landmark2D, Mapping[str, float], tuple, list]) -> Landmark2D:
        """Accept a Landmark2D, an {x, y} mapping or an (x, y) pair."""
        if isinstance(value, Landmark2D):
            return value
        if isinstance(value, Mapping):
            return cls(float(value['x']), float(value['y']))
        x, y = value
        return cls(float(x), float(y))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}


def vector_angle(u: np.ndarray, v: np.ndarray) -> float:
    """
    Unsigned angle between two vectors in degrees (0-180), unrounded.

    A zero-length vector yields 0.0.
    """
    norm = float(np.linalg.norm(u) * np.linalg.norm(v))
    if norm == 0.0:
        logger.warning("Degenerate angle: zero-length ray")
        return 0.0
    cosine = float(np.clip(np.dot(u, v) / norm, -1.0, 1.0))
    return float(np.degrees(np.arccos(cosine)))


def angle_at_vertex(p1: Landmark2D, vertex: Landmark2D, p2: Landmark2D) -> float:
    """Angle at `vertex` between rays vertex->p1 and vertex->p2, to 1 decimal."""
    u = p1.as_array() - vertex.as_array()
    v = p2.as_array() - vertex.as_array()
    return round(vector_angle(u, v), 1)


def angle_between_lines(
    line1_start: Landmark2D,
    line1_end: Landmark2D,
    line2_start: Landmark2D,
    line2_end: Landmark2D,
) -> float:
    """Angle between directed lines start->end, to 1 decimal."""
    u = line1_end.as_array() - line1_start.as_array()
    v = line2_end.as_array() - line2_start.as_array()
    return round(vector_angle(u, v), 1)


def distance(p1: Landmark2D, p2: Landmark2D) -> float:
    return float(np.linalg.norm(p2.as_array() - p1.as_array()))


def signed_distance_to_line(point: Landmark2D, line_start: Landmark2D, line_end: Landmark2D) -> float:
    """
    Perpendicular distance from `point` to the line, to 1 decimal.

    Positive when the point lies on the positive side of the 2D cross
    product (line direction x point offset), negative otherwise. A
    zero-length line falls back to the unsigned distance to its start.
    """
    direction = line_end.as_array() - line_start.as_array()
    offset = point.as_array() - line_start.as_array()
    length = float(np.linalg.norm(direction))
    if length == 0.0:
        logger.warning("Degenerate reference line: endpoints coincide")
        return round(float(np.linalg.norm(offset)), 1)

    cross = float(direction[0] * offset[1] - direction[1] * offset[0])
    return round(cross / length, 1)
