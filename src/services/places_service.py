from typing import List

import structlog
from pydantic import ValidationError

from src.config.config import config
from src.exceptions.lookup import InvalidResponseError
from src.models.geocoding.geocoding import Coordinates
from src.models.places.places import OverpassResponse
from src.services.lookup_service import LookupService

logger = structlog.get_logger(__name__)

SEARCH_RADIUS_METERS = 10000
MAX_PLACES = 5

OVERPASS_QUERY_TEMPLATE = """
[out:json];
(
  node["tourism"="attraction"]["name"](around:{radius},{lat},{lon});
  node["historic"]["name"](around:{radius},{lat},{lon});
  node["leisure"="park"]["name"](around:{radius},{lat},{lon});
);
out body {limit};
"""


def build_overpass_query(coordinates: Coordinates) -> str:
    """Overpass QL selecting named attractions, historic sites and parks near a point."""
    return OVERPASS_QUERY_TEMPLATE.format(
        radius=SEARCH_RADIUS_METERS,
        lat=coordinates.latitude,
        lon=coordinates.longitude,
        limit=MAX_PLACES,
    )


class PlacesService(LookupService):
    """
    Service for nearby points of interest from the OpenStreetMap Overpass API.

    Results keep the order the interpreter returned them in.
    """

    provider = "overpass"

    def __init__(self):
        super().__init__()

        if hasattr(self, "_places_initialized"):
            return

        self.base_url = config.overpass_base_url

        self._places_initialized = True
        logger.info("Places service initialized", base_url=self.base_url)

    async def get_places(self, coordinates: Coordinates) -> List[str]:
        """
        Get up to five named points of interest around a location.

        Elements without a name tag are skipped, so the list may be empty.

        Args:
            coordinates: Centre of the search

        Returns:
            Place names in server order

        Raises:
            LookupServiceError: If the lookup fails or the response is malformed
        """
        logger.info(
            "Fetching points of interest",
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            radius=SEARCH_RADIUS_METERS,
        )
        query = build_overpass_query(coordinates)
        data = await self._make_request(self.base_url, content=query, method="POST")

        try:
            response = OverpassResponse.model_validate(data)
        except ValidationError as e:
            logger.error("Failed to parse places data", error=str(e))
            raise InvalidResponseError(f"Invalid places data received: {str(e)}", provider=self.provider)

        places = response.place_names(MAX_PLACES)
        logger.info(
            "Successfully fetched points of interest",
            elements=len(response.elements),
            named_places=len(places),
        )
        return places


places_service = PlacesService()
