class TourismAgentError(Exception):
    """Base exception for all tourism agent errors."""

    pass
