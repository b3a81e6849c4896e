"""Output Ports - interfaces para adapters de saída"""

from ust_weather.application.ports.output.weather_provider_port import IWeatherProvider
from ust_weather.application.ports.output.key_value_storage_port import IKeyValueStorage

__all__ = ['IWeatherProvider', 'IKeyValueStorage']
