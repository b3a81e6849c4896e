"""Factory do storage persistente (escolhido por STORAGE_BACKEND)"""
from typing import Optional

from ust_weather.application.ports.output.key_value_storage_port import IKeyValueStorage
from ust_weather.infrastructure.adapters.output.storage.async_dynamodb_storage import AsyncDynamoDBStorage
from ust_weather.infrastructure.adapters.output.storage.file_storage import FileKeyValueStorage
from ust_weather.shared.config import settings
from ust_weather.shared.config.logger_config import get_logger

logger = get_logger(child=True)

_storage_instance: Optional[IKeyValueStorage] = None


def create_key_value_storage(backend: Optional[str] = None) -> IKeyValueStorage:
    """
    Cria storage para o backend informado

    Args:
        backend: 'file' ou 'dynamodb' (usa STORAGE_BACKEND se None)

    Raises:
        ValueError: Backend desconhecido
    """
    backend = (backend or settings.STORAGE_BACKEND).lower()

    if backend == 'file':
        return FileKeyValueStorage()
    if backend == 'dynamodb':
        return AsyncDynamoDBStorage()

    raise ValueError(f"Unknown storage backend: {backend}")


def get_key_value_storage() -> IKeyValueStorage:
    """Singleton reutilizado entre invocações (warm starts)"""
    global _storage_instance

    if _storage_instance is None:
        _storage_instance = create_key_value_storage()
        logger.info("Key/value storage created", backend=type(_storage_instance).__name__)

    return _storage_instance


def reset_key_value_storage() -> None:
    """Reset do singleton (testes)"""
    global _storage_instance
    _storage_instance = None
