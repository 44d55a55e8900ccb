# weather.py
"""
Weather module.
Fetches coordinates and weather data using the Open-Meteo APIs (free, no key needed).
Handles geocoding, historical same-hour temperatures and the hourly
cloud-cover forecast. Sample fetches are best effort: a failure is logged
and the sample comes back empty instead of aborting the run.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional

import requests
from dateutil import tz

from config import ARCHIVE_URL, FORECAST_URL, GEOCODING_URL, HISTORY_YEARS, CLOUD_FORECAST_DAYS, CLOUD_HOURS

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Raised when a city name cannot be resolved to coordinates."""


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float
    name: str = ''
    timezone: Optional[str] = None


@dataclass(frozen=True)
class WeatherSample:
    year: int
    temperature: Optional[float]


@dataclass(frozen=True)
class CloudSample:
    time: datetime
    cloud_cover: Optional[float]


@dataclass(frozen=True)
class TemperatureData:
    historical: List[WeatherSample]
    current: WeatherSample


def fetch_coordinates(city: str) -> Coordinate:
    """
    Resolve a city name to coordinates.
    :param city: Free-text city name.
    :return: Coordinate of the first geocoding result.
    :raises GeocodingError: If the city is unknown.
    """
    params = {'name': city, 'count': 1, 'language': 'en', 'format': 'json'}
    response = requests.get(GEOCODING_URL, params=params)
    response.raise_for_status()
    results = response.json().get('results')
    if not results:
        raise GeocodingError(f"No coordinates found for city: {city}")

    first = results[0]
    coord = Coordinate(
        latitude=first['latitude'],
        longitude=first['longitude'],
        name=first.get('name', city),
        timezone=first.get('timezone'),
    )
    logger.info("Resolved %s to %.4f, %.4f (%s)", city, coord.latitude, coord.longitude, coord.timezone)
    return coord


def _zone(coord: Coordinate):
    return tz.gettz(coord.timezone) if coord.timezone else None


def location_now(coord: Coordinate) -> datetime:
    """Current time in the location's time zone, UTC if it is unknown."""
    return datetime.now(_zone(coord) or tz.UTC)


def timezone_param(coord: Coordinate) -> str:
    """
    Time zone to request hourly data in. Matches location_now, so the
    hour of the current time indexes the hourly arrays.
    """
    return 'auto' if _zone(coord) else 'UTC'


def _same_day(year: int, today: date) -> date:
    # Feb 29 only exists in leap years
    try:
        return today.replace(year=year)
    except ValueError:
        return today.replace(year=year, day=28)


def _hourly_value(data: dict, field: str, index: int) -> float:
    value = data['hourly'][field][index]
    if value is None:
        raise ValueError(f"{field} at hour index {index} is not available")
    return value


def fetch_historical_temperature(coord: Coordinate, year: int, now: datetime) -> WeatherSample:
    """
    Fetch the temperature at the current hour on the same day of a past year.
    :param coord: Location.
    :param year: Year to look up.
    :param now: Current local time at the location.
    :return: WeatherSample; temperature is None if the fetch failed.
    """
    day = _same_day(year, now.date()).isoformat()
    params = {
        'latitude': coord.latitude,
        'longitude': coord.longitude,
        'start_date': day,
        'end_date': day,
        'hourly': 'temperature_2m',
        'timezone': timezone_param(coord),
    }
    try:
        response = requests.get(ARCHIVE_URL, params=params)
        response.raise_for_status()
        temperature = _hourly_value(response.json(), 'temperature_2m', now.hour)
        return WeatherSample(year=year, temperature=temperature)
    except Exception as e:
        logger.error("Failed to fetch historical weather data for %s %02d:00: %s", day, now.hour, e)
        return WeatherSample(year=year, temperature=None)


def fetch_current_temperature(coord: Coordinate, now: datetime) -> WeatherSample:
    """
    Fetch today's temperature at the current hour from the forecast API.
    :param coord: Location.
    :param now: Current local time at the location.
    :return: WeatherSample for the current year; temperature is None on failure.
    """
    params = {
        'latitude': coord.latitude,
        'longitude': coord.longitude,
        'hourly': 'temperature_2m',
        'forecast_days': 1,
        'timezone': timezone_param(coord),
    }
    try:
        response = requests.get(FORECAST_URL, params=params)
        response.raise_for_status()
        temperature = _hourly_value(response.json(), 'temperature_2m', now.hour)
        return WeatherSample(year=now.year, temperature=temperature)
    except Exception as e:
        logger.error("Failed to fetch current weather data for %02d:00: %s", now.hour, e)
        return WeatherSample(year=now.year, temperature=None)


def get_temperature_data(coord: Coordinate, years: int = HISTORY_YEARS) -> TemperatureData:
    """
    Get the current-hour temperature for the past years and the current year.
    The historical fetches run in parallel, newest year first in the result.
    :param coord: Location.
    :param years: Number of past years (the current year is excluded).
    :return: TemperatureData.
    """
    now = location_now(coord)
    past_years = [now.year - i for i in range(1, years + 1)]

    with ThreadPoolExecutor(max_workers=years) as executor:
        historical = list(executor.map(lambda y: fetch_historical_temperature(coord, y, now), past_years))

    current = fetch_current_temperature(coord, now)
    return TemperatureData(historical=historical, current=current)


def fetch_cloud_cover_forecast(coord: Coordinate, days: int = CLOUD_FORECAST_DAYS,
                               hours: int = CLOUD_HOURS) -> List[CloudSample]:
    """
    Fetch the hourly cloud-cover forecast starting at the current hour.
    :param coord: Location.
    :param days: Forecast days to request; the forecast starts at local midnight.
    :param hours: Number of hourly samples to return.
    :return: List of CloudSample, one per hour. Hours that could not be
        fetched have cloud_cover None.
    """
    now = location_now(coord).replace(minute=0, second=0, microsecond=0)
    # The forecast is in the location's local time, starting at midnight
    indexes = range(now.hour, now.hour + hours)
    times = [now.replace(hour=0) + timedelta(hours=i) for i in indexes]

    params = {
        'latitude': coord.latitude,
        'longitude': coord.longitude,
        'hourly': 'cloud_cover',
        'forecast_days': days,
        'timezone': timezone_param(coord),
    }
    try:
        response = requests.get(FORECAST_URL, params=params)
        response.raise_for_status()
        covers = response.json()['hourly']['cloud_cover']
        if not isinstance(covers, list):
            raise ValueError(f"cloud_cover is not a list: {covers!r}")
    except Exception as e:
        logger.error("Failed to fetch cloud cover forecast: %s", e)
        return [CloudSample(time=t, cloud_cover=None) for t in times]

    samples = []
    for i, t in zip(indexes, times):
        cover = covers[i] if i < len(covers) else None
        if cover is None:
            logger.error("Cloud cover for %s is not available", t.strftime('%Y-%m-%d %H:00'))
        samples.append(CloudSample(time=t, cloud_cover=cover))
    return samples
