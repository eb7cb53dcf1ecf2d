"""
Sun position calculator for determining solar angles at any given time and location.
Low-precision closed-form formula, suitable for driving scene lighting.
"""

import math
from datetime import datetime, date
from typing import Tuple

import numpy as np
import pytz
from astral import LocationInfo
from astral.sun import sun

from models.sun_state import SolarPosition

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
TWO_PI = 2.0 * math.pi

# Ratio of the solar day to the sidereal day
SIDEREAL_RATE = 366.2422 / 365.2422


def to_utc(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC.

    Naive datetimes are taken to be UTC already.
    """
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def time_of_day_hours(dt: datetime) -> float:
    """Fractional hours elapsed since midnight."""
    return (
        dt.hour + dt.minute / 60.0 + dt.second / 3600.0 +
        dt.microsecond / 3600000000.0
    )


def julian_date(dt: datetime) -> float:
    """
    Days since J2000.0 for the civil date of ``dt`` (time of day ignored).

    Args:
        dt: Datetime, already in UTC

    Returns:
        Julian date relative to 2451545.0
    """
    year = dt.year
    month = dt.month
    return (
        367 * year -
        math.floor((7.0 / 4.0) * (year + math.floor((month + 9.0) / 12.0))) +
        math.floor((275.0 * month) / 9.0) +
        dt.day - 730531.5
    )


def correct_angle(angle_in_radians: float) -> float:
    """
    Wrap an angle into [0, 2π].

    Negative angles map to ``2π - (|angle| mod 2π)``, so an exact negative
    multiple of 2π comes back as 2π rather than 0.
    """
    if angle_in_radians < 0:
        return TWO_PI - (abs(angle_in_radians) % TWO_PI)
    elif angle_in_radians > TWO_PI:
        return angle_in_radians % TWO_PI
    else:
        return angle_in_radians


def _azimuth(hour_angle: float, declination: float, latitude_rad: float) -> float:
    """
    Full-circle azimuth from the hour angle, measured from north through east.
    """
    azi_nom = -np.sin(hour_angle)
    azi_denom = (
        np.tan(declination) * np.cos(latitude_rad) -
        np.sin(latitude_rad) * np.cos(hour_angle)
    )
    azimuth = np.arctan(azi_nom / azi_denom)

    if azi_denom < 0:
        azimuth += math.pi
    elif azi_nom < 0:
        azimuth += TWO_PI

    return azimuth


def calculate_sun_position(dt: datetime, latitude: float, longitude: float) -> Tuple[float, float]:
    """
    Calculate the sun's azimuth and altitude.

    Args:
        dt: Instant to evaluate (aware datetimes are converted to UTC,
            naive ones are read as UTC)
        latitude: Observer latitude in decimal degrees (positive for North)
        longitude: Observer longitude in decimal degrees (positive for East)

    Returns:
        Tuple of (azimuth_radians, altitude_radians)
        - Azimuth: 0 = North, π/2 = East, π = South
        - Altitude: 0 = horizon, π/2 = zenith

    Non-finite coordinates give NaN rather than raising.
    """
    dt = to_utc(dt)
    hours = time_of_day_hours(dt)
    latitude = np.float64(latitude)
    longitude = np.float64(longitude)

    with np.errstate(all='ignore'):
        jd = julian_date(dt)
        julian_centuries = jd / 36525.0

        # Sidereal time uses the date-only Julian date
        sidereal_time_hours = 6.6974 + 2400.0513 * julian_centuries
        sidereal_time_ut = sidereal_time_hours + SIDEREAL_RATE * hours
        sidereal_time = sidereal_time_ut * 15 + longitude

        jd += hours / 24.0
        julian_centuries = jd / 36525.0

        mean_longitude = correct_angle(DEG2RAD * (280.466 + 36000.77 * julian_centuries))
        mean_anomaly = correct_angle(DEG2RAD * (357.529 + 35999.05 * julian_centuries))

        equation_of_center = DEG2RAD * (
            (1.915 - 0.005 * julian_centuries) * np.sin(mean_anomaly) +
            0.02 * np.sin(2 * mean_anomaly)
        )

        ecliptic_longitude = correct_angle(mean_longitude + equation_of_center)

        obliquity = (23.439 - 0.013 * julian_centuries) * DEG2RAD

        right_ascension = np.arctan2(
            np.cos(obliquity) * np.sin(ecliptic_longitude),
            np.cos(ecliptic_longitude)
        )

        # NOTE: sin(right ascension), not sin(ecliptic longitude) as in the
        # textbook declination. Changing it shifts every computed altitude.
        declination = np.arcsin(np.sin(right_ascension) * np.sin(obliquity))

        hour_angle = correct_angle(sidereal_time * DEG2RAD) - right_ascension
        if hour_angle > math.pi:
            hour_angle -= TWO_PI

        latitude_rad = latitude * DEG2RAD
        altitude = np.arcsin(
            np.sin(latitude_rad) * np.sin(declination) +
            np.cos(latitude_rad) * np.cos(declination) * np.cos(hour_angle)
        )

        azimuth = _azimuth(hour_angle, declination, latitude_rad)

    return float(azimuth), float(altitude)


class SunPositionCalculator:
    """
    Calculates sun position (azimuth and altitude) for a fixed location.
    """

    def __init__(self, latitude: float, longitude: float, timezone: str = "UTC"):
        """
        Initialize sun position calculator.

        Args:
            latitude: Latitude in decimal degrees (positive for North)
            longitude: Longitude in decimal degrees (positive for East)
            timezone: Timezone used for naive datetimes (e.g., "Europe/London")
        """
        self.latitude = latitude
        self.longitude = longitude
        self.tz = pytz.timezone(timezone)
        self.location = LocationInfo(
            name="Scene",
            region="",
            timezone=timezone,
            latitude=latitude,
            longitude=longitude
        )

    def localize(self, dt: datetime) -> datetime:
        """Express a datetime in the calculator's timezone (naive values are read as local)."""
        if dt.tzinfo is None:
            return self.tz.localize(dt)
        return dt.astimezone(self.tz)

    def get_solar_position(self, dt: datetime) -> SolarPosition:
        """
        Calculate sun position for a given datetime.

        Args:
            dt: Datetime object (naive values are read in the calculator's timezone)

        Returns:
            SolarPosition in radians
        """
        azimuth, altitude = calculate_sun_position(
            self.localize(dt), self.latitude, self.longitude
        )
        return SolarPosition(azimuth=azimuth, altitude=altitude)

    def get_sun_position(self, dt: datetime) -> Tuple[float, float]:
        """
        Calculate sun azimuth and altitude for a given datetime.

        Args:
            dt: Datetime object

        Returns:
            Tuple of (azimuth_degrees, altitude_degrees)
        """
        position = self.get_solar_position(dt)
        return position.azimuth_degrees, position.altitude_degrees

    def is_sun_above_horizon(self, dt: datetime) -> bool:
        """
        Check if sun is above horizon at given time.

        Args:
            dt: Datetime object

        Returns:
            True if sun is above horizon, False otherwise
        """
        return self.get_solar_position(dt).is_above_horizon()

    def get_sunrise_sunset(self, date_obj: date) -> Tuple[datetime, datetime]:
        """
        Get sunrise and sunset times for a given date.

        Args:
            date_obj: Date object

        Returns:
            Tuple of (sunrise, sunset) datetime objects

        Raises:
            ValueError: If the sun never rises or never sets on that date
        """
        s = sun(self.location.observer, date=date_obj, tzinfo=self.tz)
        return s['sunrise'], s['sunset']

    def get_daylight_hours(self, date_obj: date) -> float:
        """
        Calculate total daylight hours for a given date.

        Args:
            date_obj: Date object

        Returns:
            Daylight hours as float
        """
        sunrise, sunset = self.get_sunrise_sunset(date_obj)
        delta = sunset - sunrise
        return delta.total_seconds() / 3600.0
