"""
Sun state models: computed positions, sampled values, and day profiles.
"""

import math
from typing import List, Dict, Optional
from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class SolarPosition:
    """Sun position in radians."""

    azimuth: float  # 0 = North, π/2 = East
    altitude: float  # 0 = horizon, π/2 = zenith

    @property
    def azimuth_degrees(self) -> float:
        return math.degrees(self.azimuth)

    @property
    def altitude_degrees(self) -> float:
        return math.degrees(self.altitude)

    def is_above_horizon(self) -> bool:
        """Check if the sun is above the horizon."""
        return self.altitude > 0


@dataclass
class SunSample:
    """Sun position and light intensity at one instant."""

    time: datetime
    azimuth_degrees: float
    altitude_degrees: float
    intensity: float = 0.0


@dataclass
class DayProfile:
    """Sun samples across one civil date."""

    latitude: float
    longitude: float
    calculation_date: date
    step_minutes: float = 10.0
    samples: List[SunSample] = field(default_factory=list)
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

    def add_sample(self, sample: SunSample):
        """Add a sample to the profile."""
        self.samples.append(sample)

    def get_peak_sample(self) -> Optional[SunSample]:
        """Sample with the highest sun, or None for an empty profile."""
        if not self.samples:
            return None
        return max(self.samples, key=lambda s: s.altitude_degrees)

    def get_daylight_samples(self) -> List[SunSample]:
        """Samples with the sun above the horizon."""
        return [s for s in self.samples if s.altitude_degrees > 0]

    def get_daylight_hours(self) -> float:
        """
        Hours between sunrise and sunset.

        Falls back to counting daylight samples when there is no
        sunrise/sunset (polar day or night).
        """
        if self.sunrise is not None and self.sunset is not None:
            return (self.sunset - self.sunrise).total_seconds() / 3600.0
        return len(self.get_daylight_samples()) * self.step_minutes / 60.0

    def get_summary(self) -> Dict:
        """
        Get summary of the profile.

        Returns:
            Dictionary with sample counts, peak altitude, and the
            sunrise/sunset times when known
        """
        peak = self.get_peak_sample()
        daylight = self.get_daylight_samples()

        return {
            'date': self.calculation_date,
            'total_samples': len(self.samples),
            'daylight_samples': len(daylight),
            'daylight_hours': self.get_daylight_hours(),
            'peak_altitude': peak.altitude_degrees if peak else None,
            'peak_time': peak.time if peak else None,
            'sunrise': self.sunrise,
            'sunset': self.sunset,
        }
