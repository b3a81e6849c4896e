"""
Async DynamoDB Storage - storage chave/valor sobre uma tabela DynamoDB (aioboto3)

Estrutura do item:
{
    "storageKey": "weather_cache_v1",
    "value": "{...}",        # string (JSON serializado ou epoch ms)
    "updatedAt": "2025-11-25T10:00:00+00:00"
}
"""
from datetime import datetime, timezone
from typing import Optional

from ddtrace import tracer

from ust_weather.infrastructure.adapters.output.storage.dynamodb_client_manager import (
    DynamoDBClientManager,
    get_dynamodb_client_manager
)
from ust_weather.shared.config import settings

PARTITION_KEY = 'storageKey'
VALUE_ATTRIBUTE = 'value'


class AsyncDynamoDBStorage:
    """
    Implementação de IKeyValueStorage com DynamoDB

    Erros do cliente NÃO são silenciados aqui: PersistedWeatherCache
    converte qualquer falha em StorageResult.
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        region_name: Optional[str] = None,
        client_manager: Optional[DynamoDBClientManager] = None
    ):
        self.table_name = table_name or settings.STORAGE_TABLE_NAME
        self.region_name = region_name or settings.AWS_REGION
        self.client_manager = client_manager or get_dynamodb_client_manager(
            region_name=self.region_name
        )

    @tracer.wrap(resource="storage.dynamodb.get_item")
    async def get_item(self, key: str) -> Optional[str]:
        """
        Args:
            key: Chave lógica (partition key)

        Returns:
            Valor string ou None se o item não existir
        """
        client = await self.client_manager.get_client()
        response = await client.get_item(
            TableName=self.table_name,
            Key={PARTITION_KEY: {'S': key}},
            ConsistentRead=True
        )

        item = response.get('Item')
        if not item:
            return None

        return item.get(VALUE_ATTRIBUTE, {}).get('S')

    @tracer.wrap(resource="storage.dynamodb.set_item")
    async def set_item(self, key: str, value: str) -> None:
        """Grava (PutItem substitui o item inteiro)"""
        client = await self.client_manager.get_client()
        await client.put_item(
            TableName=self.table_name,
            Item={
                PARTITION_KEY: {'S': key},
                VALUE_ATTRIBUTE: {'S': value},
                'updatedAt': {'S': datetime.now(timezone.utc).isoformat()}
            }
        )

    async def cleanup(self) -> None:
        """Delega para o gerenciador de cliente"""
        await self.client_manager.cleanup()
