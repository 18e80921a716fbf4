"""HTTP client for the Google Geocoding API."""

from __future__ import annotations

import logging

import httpx

from ...errors import GeocoderError
from .base import GeocodeResult

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

logger = logging.getLogger(__name__)


class GoogleGeocoder:
    provider = "google"

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout = timeout
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            transport=self._transport,
        )

    def geocode(self, address: str) -> list[GeocodeResult]:
        if not self.api_key:
            raise GeocoderError("Google geocoder requires an API key (INTAKE_GEOCODER_API_KEY).")
        params = {"address": address, "key": self.api_key}
        with self._get_client() as client:
            try:
                response = client.get(self.base_url, params=params)
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise GeocoderError(f"Google geocoding request failed: {exc}") from exc

        if not isinstance(data, dict):
            raise GeocoderError("Google geocoding response is not a JSON object.")

        status = data.get("status")
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            message = data.get("error_message") or status or "unknown error"
            raise GeocoderError(f"Google geocoding returned {status}: {message}")

        results = []
        for candidate in data.get("results", []):
            location = candidate.get("geometry", {}).get("location", {})
            if "lat" not in location or "lng" not in location:
                continue
            results.append(
                GeocodeResult(
                    latitude=float(location["lat"]),
                    longitude=float(location["lng"]),
                    formatted_address=candidate.get("formatted_address"),
                    raw=candidate,
                )
            )
        logger.debug(f"Google geocoder returned {len(results)} candidate(s)")
        return results
