from typing import Optional

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """Geographic coordinates."""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")


class NominatimPlace(BaseModel):
    """A single Nominatim search hit. Nominatim encodes lat/lon as strings."""

    lat: float = Field(..., description="Latitude of the match")
    lon: float = Field(..., description="Longitude of the match")
    display_name: Optional[str] = Field(None, description="Full canonical place name")

    def to_coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.lat, longitude=self.lon)
