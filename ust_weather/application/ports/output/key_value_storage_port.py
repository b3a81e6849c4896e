"""
Output Port: Interface para storage persistente chave/valor assíncrono
Valores são strings (JSON serializado / epoch ms); implementações podem lançar exceções,
quem consome (PersistedWeatherCache) converte falhas em StorageResult.
"""
from typing import Optional, Protocol


class IKeyValueStorage(Protocol):
    """Interface assíncrona para storage chave/valor"""

    async def get_item(self, key: str) -> Optional[str]:
        """
        Busca valor por chave (None se ausente)
        """
        ...

    async def set_item(self, key: str, value: str) -> None:
        """
        Grava valor substituindo o anterior (sem merge)
        """
        ...
