"""Geocoding providers."""

from __future__ import annotations

import logging

from ...config import Settings, settings as default_settings
from .base import GeocodeResult, Geocoder
from .google import GoogleGeocoder
from .nominatim import NominatimGeocoder

logger = logging.getLogger(__name__)


def create_geocoder(settings: Settings | None = None) -> Geocoder | None:
    """Build the configured provider.

    Returns ``None`` (the null provider, meaning geocoding is skipped) when the
    provider is ``none`` or the application runs in the test environment.
    """

    settings = settings or default_settings
    if settings.is_test or settings.geocoder_provider == "none":
        logger.info("Geocoding disabled; customer locations will not be resolved")
        return None
    if settings.geocoder_provider == "google":
        if not settings.geocoder_api_key:
            logger.warning("INTAKE_GEOCODER_API_KEY is not set; customer saves will fail to geocode")
        return GoogleGeocoder(
            api_key=settings.geocoder_api_key,
            base_url=settings.geocoder_base_url,
            timeout=settings.geocoder_timeout_seconds,
        )
    return NominatimGeocoder(
        base_url=settings.geocoder_base_url,
        user_agent=settings.geocoder_user_agent,
        timeout=settings.geocoder_timeout_seconds,
    )


__all__ = ["GeocodeResult", "Geocoder", "GoogleGeocoder", "NominatimGeocoder", "create_geocoder"]
