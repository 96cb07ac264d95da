from src.models.places.places import OverpassElement, OverpassResponse

__all__ = ["OverpassElement", "OverpassResponse"]
