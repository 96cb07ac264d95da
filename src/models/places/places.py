from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class OverpassElement(BaseModel):
    """One OpenStreetMap element returned by the Overpass interpreter."""

    tags: Optional[Dict[str, str]] = Field(None, description="OpenStreetMap tags")

    @property
    def name(self) -> Optional[str]:
        if not self.tags:
            return None
        return self.tags.get("name") or None


class OverpassResponse(BaseModel):
    """Overpass interpreter JSON response."""

    elements: List[OverpassElement] = Field(..., description="Matched elements in server order")

    def place_names(self, limit: int) -> List[str]:
        """Names of the first ``limit`` elements that carry a non-empty name tag."""
        names = [element.name for element in self.elements if element.name]
        return names[:limit]
