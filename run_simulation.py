"""
Sun Lighting Driver - Main Entry Point

Computes today's sun profile for the configured location, runs the
configured number of driver ticks, and optionally saves a sun path diagram.

Usage:
    python run_simulation.py [config.yaml]
"""

import logging
import sys
from datetime import datetime

import pytz

from models.light import DirectionalLight
from utils.config_loader import load_config, get_config_value
from utils.log_handler import setup_logging
from workflow import create_driver, run_simulation, calculate_day_profile

logger = logging.getLogger(__name__)


def main(config_path: str = 'config.yaml') -> int:
    config = load_config(config_path)
    setup_logging(get_config_value(config, 'logging.level', 'INFO'))

    light = DirectionalLight()
    driver = create_driver(config, light=light)
    run_simulation(
        driver,
        ticks=get_config_value(config, 'simulation.ticks', 60),
        delta_time=get_config_value(config, 'simulation.delta_time', 1.0)
    )
    logger.info(f"Light after simulation: {light}")

    today = datetime.now(pytz.timezone(driver.timezone)).date()
    profile = calculate_day_profile(driver.latitude, driver.longitude, today, config)
    summary = profile.get_summary()
    logger.info(f"Sunrise: {summary['sunrise']}, sunset: {summary['sunset']}")
    logger.info(f"Daylight (sampled): {summary['daylight_hours']:.2f} h")

    diagram_path = get_config_value(config, 'profile.diagram_path')
    if diagram_path:
        from reports import DiagramGenerator
        DiagramGenerator().generate_sun_path_diagram(
            profile,
            output_path=diagram_path,
            night_altitude=driver.night_altitude
        )
        logger.info(f"Sun path diagram saved to {diagram_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main(*sys.argv[1:2]))
