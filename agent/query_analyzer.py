import re
from typing import Protocol

import structlog

from src.models.intent.intent import Intent

logger = structlog.get_logger(__name__)

WEATHER_KEYWORDS = ("temperature", "weather", "climate", "hot", "cold", "rain")
PLACES_KEYWORDS = ("places", "visit", "attractions", "tourist", "spots", "things to do", "plan", "trip")

_WEATHER_PATTERN = re.compile("|".join(re.escape(keyword) for keyword in WEATHER_KEYWORDS))
_PLACES_PATTERN = re.compile("|".join(re.escape(keyword) for keyword in PLACES_KEYWORDS))

# Preposition is case-insensitive, the captured name must start uppercase
_PREPOSITION_PLACE_PATTERN = re.compile(r"(?i:to|in|visit)\s+([A-Z][a-zA-Z\s]+?)(?:[,.?]|$)")
_SEGMENT_SEPARATOR = re.compile(r"[,?]")
_TRIP_PHRASE_PREFIX = re.compile(r"^(?:I'm going to|go to|visit)", re.IGNORECASE)


class QueryAnalyzer(Protocol):
    """Turns a raw travel query into an Intent."""

    def analyze(self, query: str) -> Intent:
        ...


class KeywordQueryAnalyzer:
    """
    Keyword and pattern based query analyzer.

    Intent flags come from plain substring keywords on the lower-cased
    query. The place is taken from the first "to/in/visit <Name>" phrase,
    falling back to the first comma or question-mark delimited segment
    with a leading trip phrase removed. Both flags may come back False;
    deciding what to fetch in that case is up to the caller.
    """

    def analyze(self, query: str) -> Intent:
        lower_query = query.lower()
        intent = Intent(
            place=self.extract_place(query),
            wants_weather=bool(_WEATHER_PATTERN.search(lower_query)),
            wants_places=bool(_PLACES_PATTERN.search(lower_query)),
        )
        logger.debug(
            "Query analyzed",
            place=intent.place,
            wants_weather=intent.wants_weather,
            wants_places=intent.wants_places,
        )
        return intent

    @staticmethod
    def extract_place(query: str) -> str:
        match = _PREPOSITION_PLACE_PATTERN.search(query)
        if match:
            return match.group(1).strip()

        segment = _SEGMENT_SEPARATOR.split(query, maxsplit=1)[0].strip()
        return _TRIP_PHRASE_PREFIX.sub("", segment, count=1).strip()


query_analyzer = KeywordQueryAnalyzer()
