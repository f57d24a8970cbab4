"""Forward and reverse geocoding with OpenStreetMap Nominatim"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from farmhub.core.config import settings

logger = logging.getLogger(__name__)

OSM_URL = "https://www.openstreetmap.org"
MAP_SPAN_DEGREES = 0.01


class GeocodingUnavailable(Exception):
    """The geocoding service could not answer the lookup"""


@dataclass(frozen=True)
class LocationData:
    latitude: float
    longitude: float
    city: Optional[str] = None
    country: Optional[str] = None
    display_name: Optional[str] = None


def location_string(data: LocationData) -> str:
    if data.city and data.country:
        return f"{data.city}, {data.country}"
    if data.display_name:
        return data.display_name
    return f"{data.latitude:.4f}, {data.longitude:.4f}"


def map_embed_url(latitude: float, longitude: float) -> str:
    bbox = ",".join(
        str(round(v, 6))
        for v in (
            longitude - MAP_SPAN_DEGREES,
            latitude - MAP_SPAN_DEGREES,
            longitude + MAP_SPAN_DEGREES,
            latitude + MAP_SPAN_DEGREES,
        )
    )
    return f"{OSM_URL}/export/embed.html?bbox={bbox}&layer=mapnik&marker={latitude},{longitude}"


def map_link_url(latitude: float, longitude: float) -> str:
    return f"{OSM_URL}/?mlat={latitude}&mlon={longitude}#map=15/{latitude}/{longitude}"


class Geocoder:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.GEOCODING_URL).rstrip("/")
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def _headers(self) -> dict:
        return {"User-Agent": f"{settings.APP_NAME}/{settings.APP_VERSION}"}

    async def search(self, query: str) -> Optional[LocationData]:
        """Best match for a free-text place name, or None when nothing matches.

        Raises GeocodingUnavailable when the service fails or answers garbage.
        """
        params = {"q": query, "format": "json", "limit": 1}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/search", params=params, headers=self._headers)
                response.raise_for_status()
                results = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Geocoding search failed for '{query}': {exc}")
            raise GeocodingUnavailable(f"Geocoding service unavailable: {exc}") from exc

        if not results:
            return None
        try:
            best = results[0]
            return LocationData(
                latitude=float(best["lat"]),
                longitude=float(best["lon"]),
                display_name=best.get("display_name"),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise GeocodingUnavailable(f"Unexpected geocoding payload: {exc}") from exc

    async def reverse(self, latitude: float, longitude: float) -> LocationData:
        """Resolve coordinates to a place. Lookup failures return the bare coordinates."""
        params = {"lat": latitude, "lon": longitude, "format": "json"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/reverse", params=params, headers=self._headers)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Reverse geocoding failed for {latitude},{longitude}: {exc}")
            return LocationData(latitude=latitude, longitude=longitude)

        address = data.get("address") or {}
        return LocationData(
            latitude=latitude,
            longitude=longitude,
            city=address.get("city") or address.get("town") or address.get("village"),
            country=address.get("country"),
            display_name=data.get("display_name"),
        )


async def reverse_geocode(latitude: float, longitude: float, geocoder: Optional[Geocoder] = None) -> LocationData:
    return await (geocoder or Geocoder()).reverse(latitude, longitude)


async def search_location(query: str, geocoder: Optional[Geocoder] = None) -> Optional[LocationData]:
    return await (geocoder or Geocoder()).search(query)
