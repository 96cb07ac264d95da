from src.models.geocoding.geocoding import Coordinates, NominatimPlace

__all__ = ["Coordinates", "NominatimPlace"]
