"""
Sun orientation driver.
Owns the simulated clock, location, and update cadence, and pushes the
computed sun position into a light.
"""

import logging
from datetime import datetime, time, timedelta
from typing import Optional

import pytz

from models.light import OrientationSink, IntensitySink
from models.sun_state import SolarPosition
from .lighting import NIGHT_ALTITUDE, DAY_ALTITUDE, intensity_from_altitude, orientation_from_position
from .sun_position import SunPositionCalculator

logger = logging.getLogger(__name__)


class SunOrientationDriver:
    """
    Advances a simulated clock each tick and orients a light to match the sun.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        timezone: str = "UTC",
        start_time: Optional[datetime] = None,
        time_speed: float = 1.0,
        frame_steps: int = 1,
        orientation_sink: Optional[OrientationSink] = None,
        intensity_sink: Optional[IntensitySink] = None,
        night_altitude: float = NIGHT_ALTITUDE,
        day_altitude: float = DAY_ALTITUDE
    ):
        """
        Initialize sun orientation driver.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            timezone: Timezone name used for naive datetimes
            start_time: Initial simulated time (default: now)
            time_speed: Simulated seconds per real second
            frame_steps: Recompute the sun position every Nth tick
            orientation_sink: Receives (pitch, yaw) in degrees
            intensity_sink: Receives the light intensity
            night_altitude: Altitude at or below which intensity is 0
            day_altitude: Altitude at or above which intensity is 1
        """
        self.timezone = timezone
        self.calculator = SunPositionCalculator(latitude, longitude, timezone)
        self.orientation_sink = orientation_sink
        self.intensity_sink = intensity_sink
        self.night_altitude = night_altitude
        self.day_altitude = day_altitude
        self.time_speed = time_speed
        self.frame_steps = 1
        self.frame_step = 0
        self.position: Optional[SolarPosition] = None
        self.set_update_steps(frame_steps)

        if start_time is None:
            start_time = datetime.now(pytz.utc)
        self.time = self.calculator.localize(start_time)
        self.hour = self.time.hour
        self.minutes = self.time.minute
        self.date = self.time.date()

    @property
    def latitude(self) -> float:
        return self.calculator.latitude

    @property
    def longitude(self) -> float:
        return self.calculator.longitude

    def set_time(self, hour: int, minutes: int):
        """
        Set the time of day on the current date.

        Args:
            hour: Hour (0-24)
            minutes: Minutes (0-60)
        """
        self.hour = hour
        self.minutes = minutes
        self._revalidate()

    def set_location(self, longitude: float, latitude: float):
        """
        Move the observer.

        Args:
            longitude: Longitude in decimal degrees
            latitude: Latitude in decimal degrees
        """
        self.calculator = SunPositionCalculator(latitude, longitude, self.timezone)
        logger.debug(f"Location set to lat={latitude}, lon={longitude}")

    def set_date(self, dt: datetime):
        """
        Set date and time of day, to minute resolution.

        Args:
            dt: Datetime to take the date, hour and minute from
        """
        dt = self.calculator.localize(dt)
        self.hour = dt.hour
        self.minutes = dt.minute
        self.date = dt.date()
        self._revalidate()

    def set_update_steps(self, steps: int):
        """
        Recompute the sun position only every Nth tick.

        Raises:
            ValueError: If steps is less than 1
        """
        if steps < 1:
            raise ValueError(f"Update steps must be at least 1, got {steps}")
        self.frame_steps = steps
        self.frame_step = self.frame_step % steps

    def set_time_speed(self, speed: float):
        """Set the number of simulated seconds per real second."""
        self.time_speed = speed

    def _revalidate(self):
        """Rebuild the simulated time from date, hour, and minutes."""
        local_time = datetime.combine(self.date, time()) + timedelta(hours=self.hour, minutes=self.minutes)
        self.time = self.calculator.tz.localize(local_time)
        logger.debug(f"Simulated time set to {self.time}")

    def update(self, delta_time: float) -> Optional[SolarPosition]:
        """
        Advance the simulated clock by one tick.

        Args:
            delta_time: Real seconds elapsed since the previous tick

        Returns:
            New SolarPosition if it was recomputed on this tick, otherwise None
        """
        self.time = self.calculator.tz.normalize(
            self.time + timedelta(seconds=self.time_speed * delta_time)
        )

        position = None
        if self.frame_step == 0:
            position = self.set_position()
        self.frame_step = (self.frame_step + 1) % self.frame_steps

        return position

    def set_position(self) -> SolarPosition:
        """
        Compute the sun position for the current time and push it to the sinks.

        Returns:
            The computed SolarPosition
        """
        self.position = self.calculator.get_solar_position(self.time)
        pitch, yaw = orientation_from_position(self.position.azimuth, self.position.altitude)

        if self.orientation_sink is not None:
            self.orientation_sink.set_rotation(pitch, yaw)

        if self.intensity_sink is not None:
            intensity = intensity_from_altitude(pitch, self.night_altitude, self.day_altitude)
            self.intensity_sink.set_intensity(intensity)

        logger.debug(f"{self.time}: altitude={pitch:.2f}deg, azimuth={yaw:.2f}deg")
        return self.position
