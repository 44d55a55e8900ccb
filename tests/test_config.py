import importlib
import os
import unittest
from unittest.mock import patch

import config

SETTINGS = (
    'WEATHER_STRIPES_HISTORY_YEARS',
    'WEATHER_STRIPES_CLOUD_DAYS',
    'WEATHER_STRIPES_CLOUD_HOURS',
    'WEATHER_STRIPES_PORT',
)


class TestConfig(unittest.TestCase):
    def setUp(self):
        # Start every test from the defaults, whatever the shell or .env sets
        self.env = patch.dict(os.environ)
        self.env.start()
        dotenv_patch = patch('dotenv.load_dotenv')
        dotenv_patch.start()
        for name in SETTINGS:
            os.environ.pop(name, None)
        self.addCleanup(importlib.reload, config)
        self.addCleanup(self.env.stop)
        self.addCleanup(dotenv_patch.stop)

    def reload_with(self, **settings):
        os.environ.update(settings)
        return importlib.reload(config)

    def test_defaults(self):
        loaded = self.reload_with()
        self.assertEqual(loaded.HISTORY_YEARS, 9)
        self.assertEqual(loaded.CLOUD_FORECAST_DAYS, 2)
        self.assertEqual(loaded.CLOUD_HOURS, 24)
        self.assertEqual(loaded.PORT, 5000)

    def test_overrides(self):
        loaded = self.reload_with(WEATHER_STRIPES_HISTORY_YEARS='3', WEATHER_STRIPES_CLOUD_DAYS='3',
                                  WEATHER_STRIPES_CLOUD_HOURS='49')
        self.assertEqual(loaded.HISTORY_YEARS, 3)
        self.assertEqual(loaded.CLOUD_FORECAST_DAYS, 3)
        self.assertEqual(loaded.CLOUD_HOURS, 49)

    def test_non_integer(self):
        with self.assertRaises(ValueError) as ctx:
            self.reload_with(WEATHER_STRIPES_HISTORY_YEARS='nine')
        self.assertIn('WEATHER_STRIPES_HISTORY_YEARS', str(ctx.exception))
        with self.assertRaises(ValueError):
            self.reload_with(WEATHER_STRIPES_HISTORY_YEARS='9', WEATHER_STRIPES_PORT='http')

    def test_history_years_at_least_one(self):
        with self.assertRaises(ValueError):
            self.reload_with(WEATHER_STRIPES_HISTORY_YEARS='0')

    def test_cloud_days_range(self):
        for days in ('0', '17'):
            with self.assertRaises(ValueError):
                self.reload_with(WEATHER_STRIPES_CLOUD_DAYS=days)

    def test_cloud_hours_fit_forecast(self):
        with self.assertRaises(ValueError):
            self.reload_with(WEATHER_STRIPES_CLOUD_HOURS='0')
        with self.assertRaises(ValueError):
            self.reload_with(WEATHER_STRIPES_CLOUD_DAYS='2', WEATHER_STRIPES_CLOUD_HOURS='26')
        loaded = self.reload_with(WEATHER_STRIPES_CLOUD_DAYS='2', WEATHER_STRIPES_CLOUD_HOURS='25')
        self.assertEqual(loaded.CLOUD_HOURS, 25)


if __name__ == '__main__':
    unittest.main()
