"""Open-Meteo Provider - Implementação do provider para Open-Meteo Forecast API"""
from typing import Any, Dict, Optional

from ddtrace import tracer

from ust_weather.application.ports.output.weather_provider_port import IWeatherProvider
from ust_weather.domain.constants import API
from ust_weather.domain.constants import Location as LocationConstants
from ust_weather.domain.entities.weather_data import Location, WeatherData
from ust_weather.infrastructure.adapters.output.http.resilient_fetcher import ResilientFetcher
from ust_weather.infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from ust_weather.shared.config.logger_config import get_logger

logger = get_logger(child=True)

UST_LOCATION = Location(
    name=LocationConstants.NAME,
    latitude=LocationConstants.LATITUDE,
    longitude=LocationConstants.LONGITUDE
)


class OpenMeteoProvider(IWeatherProvider):
    """
    Provider para Open-Meteo Forecast API

    Características:
    - API gratuita, sem chave
    - current + 2 dias de previsão horária (truncado em 24h no modelo)
    - Sem cache próprio: o cache multi-camada fica no use case
    """

    def __init__(
        self,
        fetcher: Optional[ResilientFetcher] = None,
        location: Location = UST_LOCATION
    ):
        """
        Args:
            fetcher: Fetch resiliente (cria um novo se None)
            location: Localização consultada (coordenadas fixas)
        """
        self.url = API.OPENMETEO_FORECAST_URL
        self.fetcher = fetcher or ResilientFetcher()
        self.location = location

    @property
    def provider_name(self) -> str:
        return "OpenMeteo"

    def build_params(self) -> Dict[str, Any]:
        """Query string da requisição /forecast"""
        return {
            'latitude': str(self.location.latitude),
            'longitude': str(self.location.longitude),
            'current': ','.join(API.CURRENT_FIELDS),
            'hourly': ','.join(API.HOURLY_FIELDS),
            'timezone': API.TIMEZONE,
            'forecast_days': str(API.FORECAST_DAYS),
        }

    @tracer.wrap(resource="openmeteo.get_weather_data")
    async def get_weather_data(self) -> WeatherData:
        """
        Flow:
        1. GET /forecast (timeout + retry no fetcher)
        2. Transforma payload em WeatherData (TransformException não é retentada)
        """
        data = await self.fetcher.fetch_with_retry(self.url, params=self.build_params())
        weather_data = OpenMeteoDataMapper.map_response_to_weather_data(data, self.location)

        logger.info(
            "Open-Meteo data fetched",
            latitude=self.location.latitude,
            longitude=self.location.longitude,
            hourly_entries=len(weather_data.hourly)
        )
        return weather_data


# Factory singleton
_provider_instance: Optional[OpenMeteoProvider] = None


def get_openmeteo_provider(fetcher: Optional[ResilientFetcher] = None) -> OpenMeteoProvider:
    """Factory para obter singleton do provider"""
    global _provider_instance

    if _provider_instance is None:
        _provider_instance = OpenMeteoProvider(fetcher=fetcher)

    return _provider_instance
