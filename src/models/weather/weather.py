from typing import Optional

from pydantic import BaseModel, Field


class CurrentConditions(BaseModel):
    """Current values block of an Open-Meteo forecast response."""

    temperature_2m: float = Field(..., description="Air temperature at 2m in Celsius")
    precipitation_probability: Optional[float] = Field(
        None, description="Probability of precipitation in percent"
    )


class OpenMeteoResponse(BaseModel):
    """Open-Meteo forecast response, restricted to the fields requested."""

    timezone: Optional[str] = Field(None, description="Resolved timezone name")
    current: CurrentConditions = Field(..., description="Current conditions")


class WeatherReading(BaseModel):
    """Current temperature and chance of rain at a location."""

    temperature_celsius: float = Field(..., description="Temperature in Celsius")
    rain_probability_percent: int = Field(
        0, ge=0, description="Probability of precipitation in percent"
    )

    @classmethod
    def from_open_meteo_response(cls, response: OpenMeteoResponse) -> "WeatherReading":
        """
        Create a WeatherReading from an Open-Meteo response.

        A missing or null precipitation probability becomes 0.

        Args:
            response: Open-Meteo API response

        Returns:
            WeatherReading: Processed weather reading
        """
        probability = response.current.precipitation_probability
        return cls(
            temperature_celsius=response.current.temperature_2m,
            rain_probability_percent=round(probability) if probability is not None else 0,
        )
