"""Domain Entities"""

from ust_weather.domain.entities.weather_data import (
    CurrentWeather,
    HourlyForecast,
    Location,
    WeatherData
)

__all__ = ['CurrentWeather', 'HourlyForecast', 'Location', 'WeatherData']
