# src/cloudregions/core/geo.py
"""
Great-circle distance helpers.
"""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in kilometers between two points given in decimal degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = math.sin(d_lat / 2) ** 2 + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def round_km(distance: float) -> int:
    """Round half up to a whole kilometer (Python's round() is banker's rounding)."""
    return int(math.floor(distance + 0.5))


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    return round_km(haversine_km(lat1, lon1, lat2, lon2))
