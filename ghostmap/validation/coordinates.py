"""Range checks for WGS84 latitude and longitude."""

from ghostmap.config import CONSTANTS
from ghostmap.validation.errors import InvalidLatitude, InvalidLongitude


def is_valid_latitude(lat: float) -> bool:
    """Return True if lat lies in [-90, 90]. NaN is never valid."""
    return -CONSTANTS.MAX_LATITUDE <= lat <= CONSTANTS.MAX_LATITUDE


def is_valid_longitude(lng: float) -> bool:
    """Return True if lng lies in [-180, 180]. NaN is never valid."""
    return -CONSTANTS.MAX_LONGITUDE <= lng <= CONSTANTS.MAX_LONGITUDE


def check_latitude(lat: float) -> float:
    """Return lat unchanged or raise InvalidLatitude."""
    if not is_valid_latitude(lat):
        raise InvalidLatitude(lat)
    return lat


def check_longitude(lng: float) -> float:
    """Return lng unchanged or raise InvalidLongitude."""
    if not is_valid_longitude(lng):
        raise InvalidLongitude(lng)
    return lng
