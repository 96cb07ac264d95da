import structlog
from pydantic import ValidationError

from src.config.config import config
from src.exceptions.lookup import InvalidResponseError
from src.models.geocoding.geocoding import Coordinates
from src.models.weather.weather import OpenMeteoResponse, WeatherReading
from src.services.lookup_service import LookupService

logger = structlog.get_logger(__name__)

CURRENT_FIELDS = "temperature_2m,precipitation_probability"


class WeatherService(LookupService):
    """
    Service for current weather conditions from the Open-Meteo API.

    Open-Meteo needs no API key and resolves the timezone from the
    coordinates when asked for ``timezone=auto``.
    """

    provider = "open-meteo"

    def __init__(self):
        """Initialize the weather service."""
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.base_url = config.open_meteo_base_url

        self._weather_initialized = True
        logger.info("Weather service initialized", base_url=self.base_url)

    async def get_weather(self, coordinates: Coordinates) -> WeatherReading:
        """
        Get current temperature and precipitation probability.

        Args:
            coordinates: Location to read the weather for

        Returns:
            WeatherReading with current conditions

        Raises:
            LookupServiceError: If the lookup fails or the response is malformed
        """
        logger.info(
            "Fetching current weather",
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
        )
        params = {
            "latitude": coordinates.latitude,
            "longitude": coordinates.longitude,
            "current": CURRENT_FIELDS,
            "timezone": "auto",
        }
        data = await self._make_request(self.base_url, params=params)

        try:
            response = OpenMeteoResponse.model_validate(data)
            reading = WeatherReading.from_open_meteo_response(response)
        except ValidationError as e:
            logger.error("Failed to parse weather data", error=str(e))
            raise InvalidResponseError(f"Invalid weather data received: {str(e)}", provider=self.provider)

        logger.info(
            "Successfully fetched current weather",
            timezone=response.timezone,
            temperature=reading.temperature_celsius,
            rain_probability=reading.rain_probability_percent,
        )
        return reading


weather_service = WeatherService()
