from datetime import datetime
from typing import Any, Dict, Optional

import structlog

from agent.query_analyzer import QueryAnalyzer, query_analyzer
from src.exceptions.orchestration import LookupFailedError, PlaceNotFoundError
from src.models.orchestrator.query_result import QueryResult
from src.services.geocoding_service import geocoding_service
from src.services.places_service import places_service
from src.services.weather_service import weather_service
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class TourismAgent(Singleton):
    """
    Routes a free-text travel query to the weather and places lookups.

    A request runs analyzer, geocoder, then weather and/or places, one
    after another. It either fully succeeds or raises; partial results
    are never returned.
    """

    def __init__(self, analyzer: Optional[QueryAnalyzer] = None):
        super().__init__()

        if hasattr(self, "_tourism_agent_initialized"):
            # The instance is shared, but an explicitly passed analyzer still wins
            if analyzer is not None:
                self.analyzer = analyzer
            return

        self.analyzer = analyzer or query_analyzer
        self.geocoding_service = geocoding_service
        self.weather_service = weather_service
        self.places_service = places_service

        self._tourism_agent_initialized = True
        logger.info("Tourism Agent has been initialized")

    async def handle(self, query: str) -> Optional[QueryResult]:
        """
        Answer a travel query with weather and/or points of interest.

        Args:
            query: Raw text typed by the user

        Returns:
            QueryResult for the place in the query, or None for blank input

        Raises:
            PlaceNotFoundError: If the extracted place cannot be geocoded
            LookupFailedError: If any lookup fails
        """
        if not query or not query.strip():
            logger.info("Ignoring empty query")
            return None

        intent = self.analyzer.analyze(query)
        logger.info(
            "Query intent resolved",
            place=intent.place,
            wants_weather=intent.wants_weather,
            wants_places=intent.wants_places,
        )

        if not intent.place:
            raise PlaceNotFoundError(intent.place)

        try:
            coordinates = await self.geocoding_service.geocode(intent.place)
            if coordinates is None:
                raise PlaceNotFoundError(intent.place)

            sections = {}

            if intent.activate_weather:
                sections["weather"] = await self.weather_service.get_weather(coordinates)

            if intent.activate_places:
                sections["places"] = await self.places_service.get_places(coordinates)

            result = QueryResult(location=intent.place, **sections)

        except PlaceNotFoundError:
            logger.warning("Place not recognized", place=intent.place)
            raise

        except Exception as e:
            logger.error("Lookup failed while processing query", query=query, error=str(e), exc_info=True)
            raise LookupFailedError(e) from e

        return result

    async def process_query(self, query: str) -> Optional[Dict[str, Any]]:
        """
        Handle a query and wrap the result for API clients.

        Args:
            query: Raw text typed by the user

        Returns:
            Dictionary with the result, the echoed query and the processing
            time, or None for blank input
        """
        start_time = datetime.now()
        logger.info("Processing tourism query", query=query, query_length=len(query))

        result = await self.handle(query)
        if result is None:
            return None

        processing_time = (datetime.now() - start_time).total_seconds()
        logger.info(
            "Tourism query processed successfully",
            query=query,
            processing_time=processing_time,
            has_weather=result.weather is not None,
            place_count=len(result.places) if result.places is not None else None,
        )
        return {
            "result": result,
            "query": query,
            "processing_time": processing_time,
        }


tourism_agent = TourismAgent()
