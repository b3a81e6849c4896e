"""
DynamoDB Client Manager - Singleton para gerenciar cliente aioboto3
Reutiliza cliente entre invocações Lambda (warm starts)
"""
import asyncio
from typing import Optional

import aioboto3
from botocore.config import Config

from ust_weather.shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DynamoDBClientManager:
    """
    Gerenciador singleton de cliente DynamoDB com aioboto3

    - Cliente persiste dentro do mesmo event loop
    - Recria o cliente quando o loop muda (asyncio.run cria novos loops)

    Uso:
        manager = DynamoDBClientManager.get_instance()
        client = await manager.get_client()
        response = await client.get_item(...)
    """

    _instance: Optional['DynamoDBClientManager'] = None

    def __init__(
        self,
        region_name: str = 'ap-southeast-1',
        max_pool_connections: int = 10,
        connect_timeout: int = 3,
        read_timeout: int = 3
    ):
        """
        Args:
            region_name: Região AWS
            max_pool_connections: Tamanho do pool de conexões
            connect_timeout: Timeout de conexão (segundos)
            read_timeout: Timeout de leitura (segundos)
        """
        self.region_name = region_name
        self.session = aioboto3.Session()
        self.boto_config = Config(
            region_name=self.region_name,
            max_pool_connections=max_pool_connections,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'max_attempts': 2, 'mode': 'standard'}
        )

        self._client = None
        self._client_loop_id = None
        self._client_context_manager = None

    @classmethod
    def get_instance(cls, region_name: str = 'ap-southeast-1') -> 'DynamoDBClientManager':
        """
        Retorna instância singleton do gerenciador

        Args:
            region_name: Região AWS (usado apenas na primeira criação)
        """
        if cls._instance is None:
            cls._instance = cls(region_name=region_name)
        return cls._instance

    async def get_client(self):
        """
        Retorna cliente DynamoDB (cria ou reutiliza no loop atual)

        Raises:
            RuntimeError: Sem event loop ativo ou falha ao criar o cliente
        """
        current_loop_id = id(asyncio.get_running_loop())

        if self._client is not None and self._client_loop_id == current_loop_id:
            return self._client

        if self._client is not None:
            await self._close_client()

        try:
            self._client_context_manager = self.session.client(
                'dynamodb',
                region_name=self.region_name,
                config=self.boto_config
            )
            self._client = await self._client_context_manager.__aenter__()
            self._client_loop_id = current_loop_id
        except Exception as e:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None
            raise RuntimeError(f"Failed to create DynamoDB client: {str(e)}") from e

        return self._client

    async def _close_client(self) -> None:
        if self._client is None:
            return

        try:
            if self._client_context_manager is not None:
                await self._client_context_manager.__aexit__(None, None, None)
        except Exception as e:
            # Loop anterior pode já estar fechado
            logger.debug("Error closing DynamoDB client", error=str(e))
        finally:
            self._client = None
            self._client_loop_id = None
            self._client_context_manager = None

    async def cleanup(self) -> None:
        """Fecha cliente e libera recursos"""
        await self._close_client()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton (útil para testes). Cleanup deve ser feito antes."""
        cls._instance = None


def get_dynamodb_client_manager(region_name: str = 'ap-southeast-1') -> DynamoDBClientManager:
    """Factory function para obter instância singleton do gerenciador"""
    return DynamoDBClientManager.get_instance(region_name=region_name)
