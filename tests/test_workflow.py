"""Tests for the simulation workflow."""
import logging
from datetime import date, datetime, timedelta

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest
import pytz

from models.light import DirectionalLight
from models.sun_state import DayProfile, SunSample
from reports.diagram_generator import DiagramGenerator
from utils.log_handler import APP_LOGGERS, setup_logging
from workflow import calculate_day_profile, create_driver, run_simulation

START = datetime(2024, 6, 20, 4, 0, tzinfo=pytz.utc)

CONFIG = {
    'location': {'latitude': 51.5, 'longitude': 0.0, 'timezone': 'UTC'},
    'simulation': {'time_speed': 600.0, 'frame_steps': 2},
    'lighting': {'night_altitude': -12.0, 'day_altitude': 0.0},
    'profile': {'step_minutes': 60},
}


class TestCreateDriver:

    def test_reads_config(self):
        light = DirectionalLight()
        driver = create_driver(CONFIG, light=light, start_time=START)
        assert (driver.latitude, driver.longitude) == (51.5, 0.0)
        assert driver.time_speed == 600.0
        assert driver.frame_steps == 2
        assert driver.orientation_sink is light
        assert driver.intensity_sink is light

    def test_defaults_for_empty_config(self):
        driver = create_driver({}, start_time=START)
        assert (driver.latitude, driver.longitude) == (0.0, 0.0)
        assert driver.time_speed == 1.0
        assert driver.frame_steps == 1
        assert driver.night_altitude == -12.0


class TestRunSimulation:

    def test_samples_only_recomputed_ticks(self):
        driver = create_driver(CONFIG, start_time=START)
        samples = run_simulation(driver, ticks=6, delta_time=1.0)
        assert len(samples) == 3
        assert driver.time == datetime(2024, 6, 20, 5, 0, tzinfo=pytz.utc)

    def test_sun_climbs_through_the_morning(self):
        config = dict(CONFIG, simulation={'time_speed': 3600.0, 'frame_steps': 1})
        light = DirectionalLight()
        driver = create_driver(config, light=light, start_time=START)
        samples = run_simulation(driver, ticks=6, delta_time=1.0)

        altitudes = [s.altitude_degrees for s in samples]
        assert altitudes == sorted(altitudes)
        assert samples[-1].intensity == 1.0
        assert light.intensity == samples[-1].intensity


class TestDayProfile:

    def test_hourly_profile(self):
        profile = calculate_day_profile(51.5, 0.0, date(2024, 6, 20), CONFIG)

        assert len(profile.samples) == 24
        assert profile.sunrise is not None and profile.sunset is not None
        assert profile.sunrise < profile.sunset

        peak = profile.get_peak_sample()
        assert peak.time.hour in (11, 12, 13)
        assert 55.0 < peak.altitude_degrees < 65.0

        summary = profile.get_summary()
        assert 14 <= summary['daylight_samples'] <= 19
        expected_hours = (profile.sunset - profile.sunrise).total_seconds() / 3600.0
        assert summary['daylight_hours'] == pytest.approx(expected_hours)
        assert 16.0 < summary['daylight_hours'] < 17.5

    def test_polar_day_has_no_sunrise(self, caplog):
        with caplog.at_level(logging.WARNING, logger="workflow"):
            profile = calculate_day_profile(80.0, 0.0, date(2024, 6, 20), CONFIG)

        assert profile.sunrise is None
        assert profile.sunset is None
        assert all(s.altitude_degrees > 0 for s in profile.samples)
        assert "No sunrise/sunset" in caplog.text
        assert profile.get_summary()['daylight_hours'] == 24.0

    @pytest.mark.parametrize("calculation_date,hours", [
        (date(2024, 3, 31), 23),
        (date(2024, 10, 27), 25),
    ])
    def test_daylight_saving_changeover(self, calculation_date, hours):
        config = dict(CONFIG, location={'timezone': 'Europe/London'})
        profile = calculate_day_profile(51.5, 0.0, calculation_date, config)

        instants = [s.time.astimezone(pytz.utc) for s in profile.samples]
        assert len(instants) == hours
        assert len(set(instants)) == hours
        assert all(b - a == timedelta(hours=1) for a, b in zip(instants, instants[1:]))
        assert profile.samples[0].time.hour == 0
        assert profile.samples[-1].time.hour == 23
        assert all(s.time.date() == calculation_date for s in profile.samples)

    def test_daylight_hours_from_sunrise_and_sunset(self):
        profile = DayProfile(
            latitude=0.0,
            longitude=0.0,
            calculation_date=date(2024, 1, 1),
            step_minutes=60,
            samples=[SunSample(datetime(2024, 1, 1, 12, tzinfo=pytz.utc), 180.0, 60.0, 1.0)],
            sunrise=datetime(2024, 1, 1, 6, 10, tzinfo=pytz.utc),
            sunset=datetime(2024, 1, 1, 18, 25, tzinfo=pytz.utc)
        )
        assert profile.get_daylight_hours() == pytest.approx(12.25)

    def test_daylight_hours_counts_samples_without_sunrise(self):
        samples = [
            SunSample(datetime(2024, 1, 1, hour, tzinfo=pytz.utc), 0.0, altitude)
            for hour, altitude in [(0, -5.0), (1, 3.0), (2, 8.0)]
        ]
        profile = DayProfile(
            latitude=0.0,
            longitude=0.0,
            calculation_date=date(2024, 1, 1),
            step_minutes=30,
            samples=samples
        )
        assert profile.get_daylight_hours() == pytest.approx(1.0)

    def test_invalid_step_rejected(self):
        with pytest.raises(ValueError):
            calculate_day_profile(0.0, 0.0, date(2024, 6, 20), {'profile': {'step_minutes': 0}})

    def test_empty_profile_summary(self):
        profile = DayProfile(latitude=0.0, longitude=0.0, calculation_date=date(2024, 1, 1))
        assert profile.get_peak_sample() is None
        assert profile.get_summary()['peak_altitude'] is None


class TestDiagram:

    def test_sun_path_diagram_saved(self, tmp_path):
        profile = calculate_day_profile(51.5, 0.0, date(2024, 6, 20), CONFIG)
        output = tmp_path / "sun_path.png"

        fig = DiagramGenerator(dpi=50).generate_sun_path_diagram(profile, output_path=str(output))
        try:
            assert output.exists()
            assert len(fig.axes) == 2
        finally:
            plt.close(fig)

    def test_empty_profile_rejected(self):
        profile = DayProfile(latitude=0.0, longitude=0.0, calculation_date=date(2024, 1, 1))
        with pytest.raises(ValueError):
            DiagramGenerator().generate_sun_path_diagram(profile)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for h in root.handlers[:]:
        root.removeHandler(h)
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_setup_logging_single_handler(restore_logging):
    setup_logging("DEBUG")
    handler = setup_logging("DEBUG")
    stream_handlers = [h for h in restore_logging.handlers if type(h) is logging.StreamHandler]
    assert stream_handlers == [handler]
    assert logging.getLogger("core").level == logging.DEBUG


def test_setup_logging_keeps_handler_subclasses(restore_logging, caplog, tmp_path):
    file_handler = logging.FileHandler(tmp_path / "app.log")
    restore_logging.addHandler(file_handler)
    try:
        setup_logging("INFO")
        assert file_handler in restore_logging.handlers

        logging.getLogger("workflow").info("profile ready")
        assert "profile ready" in caplog.text
    finally:
        restore_logging.removeHandler(file_handler)
        file_handler.close()
