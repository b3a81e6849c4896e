"""
Memory Cache - camada em memória do cache multi-camada

Objeto explícito (injetado no use case) em vez de estado global de módulo,
permitindo isolamento em testes e múltiplas instâncias.
"""
from dataclasses import dataclass
from typing import Optional

from ust_weather.domain.entities.weather_data import WeatherData


@dataclass(frozen=True)
class MemoryCacheEntry:
    value: WeatherData
    written_at_ms: int  # epoch ms


class MemoryCache:
    """Holder de um único snapshot; escrita é sempre substituição completa"""

    def __init__(self):
        self._entry: Optional[MemoryCacheEntry] = None

    def get(self) -> Optional[MemoryCacheEntry]:
        return self._entry

    def set(self, value: WeatherData, written_at_ms: int) -> None:
        self._entry = MemoryCacheEntry(value=value, written_at_ms=written_at_ms)

    def clear(self) -> None:
        self._entry = None

    def get_fresh(self, now_ms: int, window_ms: int) -> Optional[WeatherData]:
        """Valor se escrito há menos de window_ms, senão None"""
        if self._entry is None:
            return None
        if now_ms - self._entry.written_at_ms < window_ms:
            return self._entry.value
        return None
