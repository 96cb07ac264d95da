from typing import List, Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from src.config.config import config
from src.exceptions.lookup import InvalidResponseError
from src.models.geocoding.geocoding import Coordinates, NominatimPlace
from src.services.lookup_service import LookupService

logger = structlog.get_logger(__name__)

_search_results = TypeAdapter(List[NominatimPlace])


class GeocodingService(LookupService):
    """
    Service resolving place names to coordinates with OpenStreetMap Nominatim.

    Only the best match is requested; there is no disambiguation between
    several places sharing a name.
    """

    provider = "nominatim"

    def __init__(self):
        super().__init__()

        if hasattr(self, "_geocoding_initialized"):
            return

        self.base_url = config.nominatim_base_url

        self._geocoding_initialized = True
        logger.info("Geocoding service initialized", base_url=self.base_url)

    async def geocode(self, place: str) -> Optional[Coordinates]:
        """
        Resolve a place name to coordinates.

        Args:
            place: Free-text place name

        Returns:
            Coordinates of the best match, or None when nothing matched

        Raises:
            LookupServiceError: If the lookup fails or the response is malformed
        """
        logger.info("Geocoding place", place=place)
        params = {"q": place, "format": "json", "limit": 1}
        data = await self._make_request(self.base_url, params=params)

        try:
            matches = _search_results.validate_python(data)
        except ValidationError as e:
            logger.error("Failed to parse geocoding data", place=place, error=str(e))
            raise InvalidResponseError(
                f"Invalid geocoding data received for {place}: {str(e)}", provider=self.provider
            )

        if not matches:
            logger.info("No geocoding match", place=place)
            return None

        best_match = matches[0]
        coordinates = best_match.to_coordinates()
        logger.info(
            "Successfully geocoded place",
            place=place,
            matched_name=best_match.display_name,
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
        )
        return coordinates


geocoding_service = GeocodingService()
