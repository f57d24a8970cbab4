"""Current weather from WeatherAPI.com"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from farmhub.core.config import settings

logger = logging.getLogger(__name__)


class WeatherUnavailable(RuntimeError):
    """Raised when current conditions cannot be fetched."""


@dataclass(frozen=True)
class WeatherReport:
    location: str
    temperature_c: float
    feels_like_c: float
    humidity: int
    wind_kph: float
    description: str
    icon: Optional[str] = None
    visibility_km: Optional[float] = None
    pressure_mb: Optional[float] = None


def parse_current(payload: Dict[str, Any]) -> WeatherReport:
    try:
        location = payload["location"]
        current = payload["current"]
        condition = current.get("condition") or {}
        return WeatherReport(
            location=f"{location['name']}, {location['country']}",
            temperature_c=float(current["temp_c"]),
            feels_like_c=float(current["feelslike_c"]),
            humidity=int(current["humidity"]),
            wind_kph=float(current["wind_kph"]),
            description=condition.get("text", ""),
            icon=condition.get("icon"),
            visibility_km=current.get("vis_km"),
            pressure_mb=current.get("pressure_mb"),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WeatherUnavailable(f"Unexpected weather payload: {exc}") from exc


class WeatherClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.WEATHER_API_KEY
        self.base_url = (base_url or settings.WEATHER_API_URL).rstrip("/")
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport

    async def current(self, location: str) -> WeatherReport:
        if not self.api_key:
            raise WeatherUnavailable("Weather API key not configured")

        params = {"key": self.api_key, "q": location, "aqi": "no"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/current.json", params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.warning(f"Weather fetch failed for {location!r}: {exc}")
            raise WeatherUnavailable("Unable to fetch weather data") from exc
        except ValueError as exc:
            raise WeatherUnavailable("Invalid weather response") from exc

        return parse_current(payload)
