# config.py
"""
Configuration module for loading environment variables.
Every setting can be overridden in the environment or a .env file.
"""

from dotenv import load_dotenv
import os

load_dotenv()


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


# City used when the widget is requested without a city parameter
DEFAULT_CITY = os.getenv('WEATHER_STRIPES_CITY', 'München')

# Open-Meteo endpoints (free, no key needed)
GEOCODING_URL = os.getenv('WEATHER_STRIPES_GEOCODING_URL', 'https://geocoding-api.open-meteo.com/v1/search')
ARCHIVE_URL = os.getenv('WEATHER_STRIPES_ARCHIVE_URL', 'https://archive-api.open-meteo.com/v1/archive')
FORECAST_URL = os.getenv('WEATHER_STRIPES_FORECAST_URL', 'https://api.open-meteo.com/v1/forecast')

# Temperature stripes: number of past years shown under the current one
HISTORY_YEARS = _int_setting('WEATHER_STRIPES_HISTORY_YEARS', 9)

# Cloud stripes: forecast length requested and number of hourly stripes shown
CLOUD_FORECAST_DAYS = _int_setting('WEATHER_STRIPES_CLOUD_DAYS', 2)
CLOUD_HOURS = _int_setting('WEATHER_STRIPES_CLOUD_HOURS', 24)

LOG_LEVEL = os.getenv('WEATHER_STRIPES_LOG_LEVEL', 'INFO').upper()

# Flask server
HOST = os.getenv('WEATHER_STRIPES_HOST', '127.0.0.1')
PORT = _int_setting('WEATHER_STRIPES_PORT', 5000)
DEBUG = os.getenv('WEATHER_STRIPES_DEBUG', '').lower() in ('1', 'true', 'yes')

# Ensure settings are usable
if HISTORY_YEARS < 1:
    raise ValueError("WEATHER_STRIPES_HISTORY_YEARS must be at least 1.")
if not 1 <= CLOUD_FORECAST_DAYS <= 16:
    raise ValueError("WEATHER_STRIPES_CLOUD_DAYS must be between 1 and 16.")
# The forecast starts at midnight, so a run late in the day needs a full day of slack
if not 1 <= CLOUD_HOURS <= (CLOUD_FORECAST_DAYS - 1) * 24 + 1:
    raise ValueError("WEATHER_STRIPES_CLOUD_HOURS does not fit in the requested forecast days.")
