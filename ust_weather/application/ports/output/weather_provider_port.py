"""Weather Provider Port - Interface para o caminho de aquisição (fetch + transform)"""
from abc import ABC, abstractmethod

from ust_weather.domain.entities.weather_data import WeatherData


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    A aplicação usa apenas Open-Meteo, mas mantemos a interface
    para facilitar troca futura de fonte e isolar os use cases nos testes.
    """

    @abstractmethod
    async def get_weather_data(self) -> WeatherData:
        """
        Busca e transforma dados atuais + previsão horária

        Returns:
            WeatherData transformado (ainda não persistido)

        Raises:
            FetchException: Se a rede falhar após todas as tentativas
            TransformException: Se o payload estiver malformado
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenMeteo')"""
        pass
