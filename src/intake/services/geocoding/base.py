"""Common types for geocoding providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol


@dataclass(slots=True)
class GeocodeResult:
    """A single candidate returned by a provider.

    ``raw`` carries the provider's untouched payload for the candidate.
    """

    latitude: float
    longitude: float
    formatted_address: Optional[str] = None
    raw: dict = field(default_factory=dict)


class Geocoder(Protocol):
    provider: str

    def geocode(self, address: str) -> list[GeocodeResult]:
        ...
