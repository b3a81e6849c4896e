"""
OpenMeteo Data Mapper - Transforma dados da API Open-Meteo para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)

Função pura: sem I/O e sem cache. Campo ausente é erro fatal
(TransformException), nunca substituído por zero.
"""
from typing import Any, List, Mapping

from ust_weather.domain.constants import API, Forecast
from ust_weather.domain.entities.weather_data import (
    CurrentWeather,
    HourlyForecast,
    Location,
    WeatherData,
)
from ust_weather.domain.exceptions import TransformException
from ust_weather.shared.utils.rounding import round_half_up

# Metros → km
_METERS_PER_KM = 1000


class OpenMeteoDataMapper:
    """
    Mapper para transformar respostas da API Open-Meteo em entities de domínio

    Responsabilidade: Traduzir formato Open-Meteo → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_response_to_weather_data(
        data: Mapping[str, Any],
        location: Location
    ) -> WeatherData:
        """
        Mapeia resposta /forecast (current + hourly) para WeatherData

        Args:
            data: Resposta raw da API Open-Meteo
            location: Localização consultada

        Returns:
            WeatherData com no máximo 24 horas de previsão

        Raises:
            TransformException: Se algum bloco/campo esperado estiver ausente,
                se os arrays horários tiverem tamanhos diferentes ou valores inválidos
        """
        if not isinstance(data, Mapping):
            raise TransformException(
                "Provider payload is not a JSON object",
                details={"type": type(data).__name__}
            )

        current = OpenMeteoDataMapper.map_current(OpenMeteoDataMapper._require_block(data, 'current'))
        hourly = OpenMeteoDataMapper.map_hourly(OpenMeteoDataMapper._require_block(data, 'hourly'))

        return WeatherData(current=current, hourly=hourly, location=location)

    @staticmethod
    def map_current(block: Mapping[str, Any]) -> CurrentWeather:
        """Bloco `current` → CurrentWeather (arredonda temperatura, vento, pressão e visibilidade)"""
        values = {
            name: OpenMeteoDataMapper._require_value(block, name, 'current')
            for name in API.CURRENT_FIELDS + ('time',)
        }

        try:
            return CurrentWeather(
                temperature=round_half_up(values['temperature_2m']),
                humidity=values['relative_humidity_2m'],
                weather_code=int(values['weather_code']),
                wind_speed=round_half_up(values['wind_speed_10m']),
                wind_direction=values['wind_direction_10m'],
                pressure=round_half_up(values['surface_pressure']),
                visibility=round_half_up(values['visibility'] / _METERS_PER_KM),
                uv_index=values['uv_index'],
                time=str(values['time']),
            )
        except (TypeError, ValueError) as e:
            raise TransformException(
                f"Invalid value in current block: {e}",
                details={"block": "current"}
            ) from e

    @staticmethod
    def map_hourly(block: Mapping[str, Any]) -> List[HourlyForecast]:
        """
        Arrays paralelos do bloco `hourly` → lista de HourlyForecast

        Todos os arrays devem ter o mesmo tamanho de `hourly.time` (integridade),
        depois o zip é truncado nas primeiras 24 entradas.
        """
        columns = {
            name: OpenMeteoDataMapper._require_array(block, name)
            for name in ('time',) + API.HOURLY_FIELDS
        }

        expected_length = len(columns['time'])
        mismatched = {
            name: len(values)
            for name, values in columns.items()
            if len(values) != expected_length
        }
        if mismatched:
            raise TransformException(
                "Hourly arrays have different lengths",
                details={"expected": expected_length, "mismatched": mismatched}
            )

        forecasts = []
        for index in range(min(expected_length, Forecast.HOURLY_LIMIT)):
            row = {
                name: OpenMeteoDataMapper._require_item(values, index, name)
                for name, values in columns.items()
            }
            try:
                forecasts.append(HourlyForecast(
                    time=str(row['time']),
                    temperature=round_half_up(row['temperature_2m']),
                    weather_code=int(row['weather_code']),
                    precipitation=row['precipitation'],
                    precipitation_probability=row['precipitation_probability'],
                    humidity=row['relative_humidity_2m'],
                    wind_speed=round_half_up(row['wind_speed_10m']),
                ))
            except (TypeError, ValueError) as e:
                raise TransformException(
                    f"Invalid value in hourly entry {index}: {e}",
                    details={"block": "hourly", "index": index}
                ) from e

        return forecasts

    @staticmethod
    def _require_block(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
        block = data.get(name)
        if not isinstance(block, Mapping):
            raise TransformException(
                f"Missing '{name}' block in provider payload",
                details={"block": name}
            )
        return block

    @staticmethod
    def _require_value(block: Mapping[str, Any], name: str, block_name: str) -> Any:
        value = block.get(name)
        if value is None:
            raise TransformException(
                f"Missing field '{block_name}.{name}' in provider payload",
                details={"block": block_name, "field": name}
            )
        return value

    @staticmethod
    def _require_array(block: Mapping[str, Any], name: str) -> List[Any]:
        values = block.get(name)
        if not isinstance(values, list):
            raise TransformException(
                f"Missing array 'hourly.{name}' in provider payload",
                details={"block": "hourly", "field": name}
            )
        return values

    @staticmethod
    def _require_item(values: List[Any], index: int, name: str) -> Any:
        value = values[index]
        if value is None:
            raise TransformException(
                f"Missing value 'hourly.{name}[{index}]' in provider payload",
                details={"block": "hourly", "field": name, "index": index}
            )
        return value
