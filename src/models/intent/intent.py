from pydantic import BaseModel, ConfigDict, Field


class Intent(BaseModel):
    """What a free-text travel query asks for, and about which place."""

    model_config = ConfigDict(frozen=True)

    place: str = Field(..., description="Place name extracted from the query")
    wants_weather: bool = Field(..., description="Query mentions a weather keyword")
    wants_places: bool = Field(..., description="Query mentions a sightseeing keyword")

    @property
    def activate_weather(self) -> bool:
        # No keyword group matched at all means fetch everything
        return self.wants_weather or not self.wants_places

    @property
    def activate_places(self) -> bool:
        return self.wants_places or not self.wants_weather
