from src.exceptions.orchestration.orchestration_service_error import OrchestrationServiceError


class PlaceNotFoundError(OrchestrationServiceError):
    """Exception raised when the geocoder has no match for the extracted place."""

    def __init__(self, place: str):
        super().__init__(f"No geocoding result for place: {place!r}")
        self.place = place

    @property
    def user_message(self) -> str:
        return f'I don\'t know if "{self.place}" exists or I couldn\'t find it in my database.'
