from typing import List, Optional

from pydantic import BaseModel, Field

from src.models.weather.weather import WeatherReading


class QueryResult(BaseModel):
    """Aggregated answer to one travel query."""

    location: str = Field(..., description="Place name as extracted from the query")
    weather: Optional[WeatherReading] = Field(
        None, description="Current weather, present when the weather lookup ran"
    )
    places: Optional[List[str]] = Field(
        None,
        max_length=5,
        description="Up to 5 points of interest, present when the places lookup ran"
    )


class QueryResponse(BaseModel):
    """API envelope around a QueryResult."""

    result: QueryResult
    query: str
    processing_time: float = Field(..., description="Seconds spent handling the query")


class IntentResponse(BaseModel):
    """Analyzer output together with the lookups it would activate."""

    place: str
    wants_weather: bool
    wants_places: bool
    activate_weather: bool
    activate_places: bool
