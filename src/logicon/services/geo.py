"""Great-circle distance on a spherical Earth."""

import math

EARTH_RADIUS_KM = 6371.0


def great_circle_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in kilometres between two coordinates in degrees.

    Uses the spherical law of cosines. Rounding can push the cosine term just
    outside [-1, 1] for identical or antipodal points, so it is clamped before
    ``acos``.
    """
    if lat1 == lat2 and lng1 == lng2:
        return 0.0

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_lambda = math.radians(lng2) - math.radians(lng1)

    cos_angle = math.cos(phi1) * math.cos(phi2) * math.cos(d_lambda) + math.sin(phi1) * math.sin(phi2)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return EARTH_RADIUS_KM * math.acos(cos_angle)
