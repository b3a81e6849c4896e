"""
Weather Data Entities - modelo interno do dashboard

WeatherData é a unidade de cache: é gravada, persistida e restaurada como
um valor atômico. Snapshots são imutáveis e substituídos por inteiro a cada
refresh.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple


def _number(data: Mapping[str, Any], key: str) -> float:
    """
    Lê campo numérico de um dict serializado

    Raises:
        KeyError: Campo ausente
        TypeError: Valor não numérico (None, string, bool)
    """
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Field '{key}' must be a number, got {type(value).__name__}")
    return value


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class CurrentWeather:
    """Condições atuais (bloco `current` do Open-Meteo já convertido)"""
    temperature: int  # °C arredondado
    humidity: float  # %
    weather_code: int  # WMO code
    wind_speed: int  # km/h arredondado
    wind_direction: float  # graus (0-360)
    pressure: int  # hPa arredondado
    visibility: int  # km (metros / 1000, arredondado)
    uv_index: float  # 0-11+
    time: str  # ISO 8601, horário local do provider

    def to_dict(self) -> Dict[str, Any]:
        return {
            'temperature': self.temperature,
            'humidity': self.humidity,
            'weatherCode': self.weather_code,
            'windSpeed': self.wind_speed,
            'windDirection': self.wind_direction,
            'pressure': self.pressure,
            'visibility': self.visibility,
            'uvIndex': self.uv_index,
            'time': self.time,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CurrentWeather':
        return cls(
            temperature=_number(data, 'temperature'),
            humidity=_number(data, 'humidity'),
            weather_code=_number(data, 'weatherCode'),
            wind_speed=_number(data, 'windSpeed'),
            wind_direction=_number(data, 'windDirection'),
            pressure=_number(data, 'pressure'),
            visibility=_number(data, 'visibility'),
            uv_index=_number(data, 'uvIndex'),
            time=_text(data, 'time'),
        )


@dataclass(frozen=True)
class HourlyForecast:
    """
    Previsão de uma hora

    A série é ordenada cronologicamente; o índice 0 é a hora de previsão mais
    próxima de "agora" (pode ser a hora parcial corrente).
    """
    time: str  # ISO 8601 (ex: "2025-06-01T14:00")
    temperature: float  # °C
    weather_code: int  # WMO code
    precipitation: float  # mm
    precipitation_probability: float  # % (0-100)
    humidity: float  # %
    wind_speed: float  # km/h

    def to_dict(self) -> Dict[str, Any]:
        return {
            'time': self.time,
            'temperature': self.temperature,
            'weatherCode': self.weather_code,
            'precipitation': self.precipitation,
            'precipitationProbability': self.precipitation_probability,
            'humidity': self.humidity,
            'windSpeed': self.wind_speed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HourlyForecast':
        return cls(
            time=_text(data, 'time'),
            temperature=_number(data, 'temperature'),
            weather_code=_number(data, 'weatherCode'),
            precipitation=_number(data, 'precipitation'),
            precipitation_probability=_number(data, 'precipitationProbability'),
            humidity=_number(data, 'humidity'),
            wind_speed=_number(data, 'windSpeed'),
        )


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Location':
        return cls(
            name=_text(data, 'name'),
            latitude=_number(data, 'latitude'),
            longitude=_number(data, 'longitude'),
        )


@dataclass(frozen=True)
class WeatherData:
    """Agregado current + hourly + location"""
    current: CurrentWeather
    location: Location
    hourly: Tuple[HourlyForecast, ...] = ()

    def __post_init__(self):
        # Série imutável: o mesmo snapshot é compartilhado pelo cache em memória
        object.__setattr__(self, 'hourly', tuple(self.hourly))

    def to_dict(self) -> Dict[str, Any]:
        """
        Converte para o formato JSON consumido pelo dashboard (camelCase)

        Returns:
            Dict serializável com json.dumps
        """
        return {
            'current': self.current.to_dict(),
            'hourly': [hour.to_dict() for hour in self.hourly],
            'location': self.location.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeatherData':
        """
        Reconstrói a partir de to_dict()

        Raises:
            KeyError: Se a estrutura estiver incompleta
            TypeError: Se algum campo tiver tipo inválido (ex: precipitation null)
        """
        hourly: Iterable[Dict[str, Any]] = data['hourly']
        if not isinstance(hourly, list):
            raise TypeError("Field 'hourly' must be a list")

        return cls(
            current=CurrentWeather.from_dict(data['current']),
            hourly=tuple(HourlyForecast.from_dict(hour) for hour in hourly),
            location=Location.from_dict(data['location']),
        )
