# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Shadow cast by a vertical object on level ground.

Length and compass direction only; drawing the shadow is left to the
map layer.
"""
import math
from dataclasses import dataclass

import numpy as np

from sunviz.domain.observation import SunPosition
from sunviz.domain.validation import InvalidInputError, require_finite


@dataclass(frozen=True)
class Shadow:
    """Shadow of a vertical object. Length is inf while the sun is down."""
    length_m: float
    direction_deg: float  # [0, 360), clockwise from north


def validate_object_height(object_height_m: float) -> float:
    height = require_finite("object_height_m", object_height_m)
    if height < 0.0:
        raise InvalidInputError("object_height_m", object_height_m, "must be non-negative")
    return height


def shadow_length(object_height_m: float, elevation_deg: float) -> float:
    """Shadow length for a given sun elevation; inf at or below the horizon."""
    height = validate_object_height(object_height_m)
    if elevation_deg <= 0.0:
        return math.inf
    return height / float(np.tan(np.radians(elevation_deg)))


def shadow_direction_deg(azimuth_deg: float) -> float:
    """Shadows point away from the sun."""
    return (azimuth_deg + 180.0) % 360.0


def compute_shadow(object_height_m: float, position: SunPosition) -> Shadow:
    """
    Shadow of a vertical object of the given height.

    Args:
        object_height_m: Object height in meters (>= 0).
        position: Sun position from compute_position().

    Returns:
        Shadow with length in meters and direction in degrees.
    """
    return Shadow(
        length_m=shadow_length(object_height_m, position.elevation_deg),
        direction_deg=shadow_direction_deg(position.azimuth_deg),
    )
