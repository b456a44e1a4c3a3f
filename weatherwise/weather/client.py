from __future__ import annotations

import logging
from typing import Any

import requests

from .config import DEFAULT_WEATHER_CONFIG, WeatherConfig

logger = logging.getLogger(__name__)


class WeatherServiceError(Exception):
    """Raised when current weather cannot be fetched."""


class APIKeyMissingError(WeatherServiceError):
    """Raised when no API key is configured or the key is rejected."""


class LocationNotFoundError(WeatherServiceError):
    """Raised when the provider has no data for the coordinates."""


def _transform(data: dict[str, Any]) -> dict[str, Any]:
    try:
        weather = data["weather"][0]
        return {
            "current": {
                "temperature": float(data["main"]["temp"]),
                "condition": str(weather["main"]),
                "description": str(weather.get("description", "")),
            }
        }
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise WeatherServiceError("Malformed weather response") from exc


def fetch_current_weather(
    latitude: float,
    longitude: float,
    config: WeatherConfig = DEFAULT_WEATHER_CONFIG,
) -> dict[str, Any]:
    """
    Fetch current conditions from OpenWeatherMap.

    Returns ``{"current": {"temperature", "condition", "description"}}``
    with temperature in the configured units.
    """
    if not config.enabled or not config.api_key:
        logger.error("OPENWEATHER_API_KEY is not configured")
        raise APIKeyMissingError("OPENWEATHER_API_KEY is not configured")

    params = {
        "lat": latitude,
        "lon": longitude,
        "units": config.units,
        "appid": config.api_key,
    }

    try:
        logger.info("Fetching current weather for (%s, %s)", latitude, longitude)
        response = requests.get(config.base_url, params=params, timeout=config.timeout)
    except requests.exceptions.Timeout as exc:
        logger.error("Timeout fetching weather for (%s, %s)", latitude, longitude)
        raise WeatherServiceError(f"Timed out after {config.timeout}s") from exc
    except requests.exceptions.RequestException as exc:
        logger.error("Request failed fetching weather: %s", exc)
        raise WeatherServiceError(f"Request failed: {exc}") from exc

    if response.status_code == 401:
        logger.error("Invalid OpenWeatherMap API key")
        raise APIKeyMissingError("Invalid OPENWEATHER_API_KEY")
    if response.status_code == 404:
        logger.warning("No weather data for (%s, %s)", latitude, longitude)
        raise LocationNotFoundError(f"No weather data for ({latitude}, {longitude})")
    if response.status_code != 200:
        logger.error("OpenWeatherMap API error: %s - %s", response.status_code, response.text)
        raise WeatherServiceError(f"OpenWeatherMap API returned status {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        raise WeatherServiceError("Weather response was not JSON") from exc

    return _transform(data)
