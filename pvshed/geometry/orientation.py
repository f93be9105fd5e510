"""Pan azimuths from the ridge orientation."""

from typing import Optional, Tuple


def pan_azimuths(orientation_deg: float, has_two_pans: bool) -> Tuple[float, Optional[float]]:
    """
    Azimuth of each pan, clockwise from north.

    ``orientation_deg`` is the ridge direction (0 = north-south ridge).
    Pan A faces the ridge direction + 90, pan B the opposite side.

    Example: an east-west ridge (90) gives pan A = 180 (south), pan B = 0.
    """
    normalized = orientation_deg % 360
    azimuth_a = (normalized + 90) % 360
    azimuth_b = (normalized + 270) % 360 if has_two_pans else None
    return azimuth_a, azimuth_b
