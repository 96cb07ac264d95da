from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from agent.tourism_agent import TourismAgent
from src.models.geocoding.geocoding import Coordinates
from src.models.weather.weather import WeatherReading


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and hand back the client used inside `async with`."""
    with patch('httpx.AsyncClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client.client_class = mock_client_class
        yield mock_client


def _build_response(json_data=None, status_code=200, text=""):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.text = text
    mock_response.json.return_value = json_data
    return mock_response


@pytest.fixture
def make_response():
    """Factory for fake httpx responses."""
    return _build_response


@pytest.fixture
def paris_coordinates():
    return Coordinates(latitude=48.8588897, longitude=2.3200410)


@pytest.fixture
def sample_weather_reading():
    return WeatherReading(temperature_celsius=18.4, rain_probability_percent=35)


@pytest.fixture
def sample_places():
    return ["Eiffel Tower", "Louvre Museum", "Jardin des Tuileries"]


@pytest.fixture
def mock_geocoding_service(paris_coordinates):
    mock_service = AsyncMock()
    mock_service.geocode = AsyncMock(return_value=paris_coordinates)
    return mock_service


@pytest.fixture
def mock_weather_service(sample_weather_reading):
    mock_service = AsyncMock()
    mock_service.get_weather = AsyncMock(return_value=sample_weather_reading)
    return mock_service


@pytest.fixture
def mock_places_service(sample_places):
    mock_service = AsyncMock()
    mock_service.get_places = AsyncMock(return_value=sample_places)
    return mock_service


@pytest.fixture
def tourism_agent(mock_geocoding_service, mock_weather_service, mock_places_service):
    """A fresh TourismAgent wired to mocked lookup services."""
    TourismAgent.reset_instance()
    agent = TourismAgent()
    agent.geocoding_service = mock_geocoding_service
    agent.weather_service = mock_weather_service
    agent.places_service = mock_places_service
    yield agent
    TourismAgent.reset_instance()
