from src.models.weather.weather import CurrentConditions, OpenMeteoResponse, WeatherReading

__all__ = ["CurrentConditions", "OpenMeteoResponse", "WeatherReading"]
