from src.services.geocoding_service import GeocodingService, geocoding_service
from src.services.lookup_service import LookupService
from src.services.places_service import PlacesService, places_service
from src.services.weather_service import WeatherService, weather_service

__all__ = [
    "GeocodingService",
    "LookupService",
    "PlacesService",
    "WeatherService",
    "geocoding_service",
    "places_service",
    "weather_service",
]
