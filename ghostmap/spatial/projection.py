"""WGS84 to Web Mercator (EPSG:3857) projection."""

import math

from ghostmap.config import CONSTANTS
from ghostmap.models.geometry import Point, WebMercatorPoint


def project_to_web_mercator(point: Point) -> WebMercatorPoint:
    """Project a geographic point onto the Web Mercator plane.

    Formula:
        x = lng * (R * pi / 180)
        y = R * ln(tan(pi / 4 + lat_rad / 2))

    with R = 6378137.0 m. The result is not clamped: y grows without bound
    as latitude approaches +/-90.

    Args:
        point: Validated WGS84 point

    Returns:
        Planar position in metres
    """
    radius = CONSTANTS.WEB_MERCATOR_RADIUS_M
    x = point.lng * (radius * math.pi / 180.0)
    lat_rad = point.lat * math.pi / 180.0
    tangent = math.tan(math.pi / 4.0 + lat_rad / 2.0)
    # tan reaches exactly 0.0 at the south pole
    y = radius * math.log(tangent) if tangent > 0 else -math.inf
    return WebMercatorPoint(x=x, y=y)
