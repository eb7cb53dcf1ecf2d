"""
Simulation workflow functions for the sun lighting driver.

This module builds a driver from configuration, steps it through simulated
ticks, and samples whole-day sun profiles.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from core import SunOrientationDriver, SunPositionCalculator, intensity_from_altitude
from core.lighting import NIGHT_ALTITUDE, DAY_ALTITUDE
from models.light import DirectionalLight
from models.sun_state import DayProfile, SunSample
from utils.config_loader import get_config_value

logger = logging.getLogger(__name__)


def create_driver(
    config: dict,
    light: Optional[DirectionalLight] = None,
    start_time: Optional[datetime] = None
) -> SunOrientationDriver:
    """
    Build a sun orientation driver from configuration.

    Args:
        config: Configuration dictionary
        light: Light receiving orientation and intensity (optional)
        start_time: Initial simulated time (default: now)

    Returns:
        SunOrientationDriver
    """
    latitude = get_config_value(config, 'location.latitude', 0.0)
    longitude = get_config_value(config, 'location.longitude', 0.0)
    timezone = get_config_value(config, 'location.timezone', 'UTC')

    logger.info(f"Creating sun driver (lat: {latitude}, lon: {longitude}, tz: {timezone})")
    driver = SunOrientationDriver(
        latitude=latitude,
        longitude=longitude,
        timezone=timezone,
        start_time=start_time,
        time_speed=get_config_value(config, 'simulation.time_speed', 1.0),
        frame_steps=get_config_value(config, 'simulation.frame_steps', 1),
        orientation_sink=light,
        intensity_sink=light,
        night_altitude=get_config_value(config, 'lighting.night_altitude', NIGHT_ALTITUDE),
        day_altitude=get_config_value(config, 'lighting.day_altitude', DAY_ALTITUDE)
    )
    logger.info(f"Simulated time starts at {driver.time}")
    return driver


def run_simulation(driver: SunOrientationDriver, ticks: int, delta_time: float) -> List[SunSample]:
    """
    Step the driver through a number of ticks.

    Args:
        driver: Sun orientation driver
        ticks: Number of ticks to run
        delta_time: Real seconds per tick

    Returns:
        One SunSample per tick on which the sun position was recomputed
    """
    logger.info(f"Running {ticks} tick(s) of {delta_time}s at time speed {driver.time_speed}")
    samples = []

    for _ in range(ticks):
        position = driver.update(delta_time)
        if position is None:
            continue
        samples.append(SunSample(
            time=driver.time,
            azimuth_degrees=position.azimuth_degrees,
            altitude_degrees=position.altitude_degrees,
            intensity=intensity_from_altitude(
                position.altitude_degrees, driver.night_altitude, driver.day_altitude
            )
        ))

    logger.info(f"Simulation finished at {driver.time} with {len(samples)} recompute(s)")
    return samples


def calculate_day_profile(
    latitude: float,
    longitude: float,
    calculation_date: date,
    config: dict
) -> DayProfile:
    """
    Sample the sun across one civil date.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        calculation_date: Date to sample
        config: Configuration dictionary

    Returns:
        DayProfile
    """
    timezone = get_config_value(config, 'location.timezone', 'UTC')
    step_minutes = get_config_value(config, 'profile.step_minutes', 10)
    night_altitude = get_config_value(config, 'lighting.night_altitude', NIGHT_ALTITUDE)
    day_altitude = get_config_value(config, 'lighting.day_altitude', DAY_ALTITUDE)

    if step_minutes <= 0:
        raise ValueError(f"profile.step_minutes must be positive, got {step_minutes}")

    logger.info(f"Calculating day profile for {calculation_date} (lat: {latitude}, lon: {longitude})")
    calculator = SunPositionCalculator(latitude, longitude, timezone)
    profile = DayProfile(
        latitude=latitude,
        longitude=longitude,
        calculation_date=calculation_date,
        step_minutes=step_minutes
    )

    try:
        profile.sunrise, profile.sunset = calculator.get_sunrise_sunset(calculation_date)
    except ValueError as e:
        # Polar day or polar night
        logger.warning(f"No sunrise/sunset on {calculation_date}: {e}")

    # Step in absolute time so DST changeover days get 23 or 25 hours
    tz = calculator.tz
    step = timedelta(minutes=step_minutes)
    current_time = tz.localize(datetime.combine(calculation_date, time()))
    end_time = tz.localize(datetime.combine(calculation_date + timedelta(days=1), time()))

    while current_time < end_time:
        azimuth, altitude = calculator.get_sun_position(current_time)
        profile.add_sample(SunSample(
            time=current_time,
            azimuth_degrees=azimuth,
            altitude_degrees=altitude,
            intensity=intensity_from_altitude(altitude, night_altitude, day_altitude)
        ))
        current_time = tz.normalize(current_time + step)

    summary = profile.get_summary()
    logger.info(
        f"Profile complete: {summary['total_samples']} samples, "
        f"peak altitude {summary['peak_altitude']:.2f}deg at {summary['peak_time']}"
    )
    return profile
