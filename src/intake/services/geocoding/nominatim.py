"""HTTP client for OpenStreetMap Nominatim search."""

from __future__ import annotations

import logging

import httpx

from ...errors import GeocoderError
from .base import GeocodeResult

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org"

logger = logging.getLogger(__name__)


class NominatimGeocoder:
    provider = "nominatim"

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str = "foodbank-intake",
        timeout: float = 10.0,
        limit: int = 5,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.limit = limit
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        # Nominatim's usage policy rejects requests without an identifying agent
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        )

    def geocode(self, address: str) -> list[GeocodeResult]:
        params = {"q": address, "format": "jsonv2", "limit": str(self.limit)}
        with self._get_client() as client:
            try:
                response = client.get(f"{self.base_url}/search", params=params)
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise GeocoderError(f"Nominatim geocoding request failed: {exc}") from exc

        if not isinstance(data, list):
            raise GeocoderError("Nominatim response is not a list of places.")

        results = []
        for place in data:
            try:
                latitude = float(place["lat"])
                longitude = float(place["lon"])
            except (KeyError, TypeError, ValueError):
                continue
            results.append(
                GeocodeResult(
                    latitude=latitude,
                    longitude=longitude,
                    formatted_address=place.get("display_name"),
                    raw=place,
                )
            )
        logger.debug(f"Nominatim geocoder returned {len(results)} candidate(s)")
        return results
