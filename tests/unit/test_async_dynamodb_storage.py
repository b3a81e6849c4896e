"""Testes unitários para AsyncDynamoDBStorage"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ust_weather.infrastructure.adapters.output.storage.async_dynamodb_storage import AsyncDynamoDBStorage
from ust_weather.infrastructure.adapters.output.storage.dynamodb_client_manager import DynamoDBClientManager


@pytest.fixture
def mock_client():
    return AsyncMock()


@pytest.fixture
def mock_client_manager(mock_client):
    """Mock do gerenciador de cliente"""
    manager = MagicMock()
    manager.get_client = AsyncMock(return_value=mock_client)
    manager.cleanup = AsyncMock()
    return manager


@pytest.fixture
def storage(mock_client_manager):
    return AsyncDynamoDBStorage(table_name='test-table', client_manager=mock_client_manager)


class TestAsyncDynamoDBStorage:

    @pytest.mark.asyncio
    async def test_get_item_miss(self, storage, mock_client):
        mock_client.get_item.return_value = {}

        assert await storage.get_item('weather_cache_v1') is None
        mock_client.get_item.assert_awaited_once_with(
            TableName='test-table',
            Key={'storageKey': {'S': 'weather_cache_v1'}},
            ConsistentRead=True
        )

    @pytest.mark.asyncio
    async def test_get_item_hit(self, storage, mock_client):
        mock_client.get_item.return_value = {
            'Item': {
                'storageKey': {'S': 'weather_cache_ts_v1'},
                'value': {'S': '1748755800000'},
            }
        }

        assert await storage.get_item('weather_cache_ts_v1') == '1748755800000'

    @pytest.mark.asyncio
    async def test_set_item_puts_full_item(self, storage, mock_client):
        await storage.set_item('weather_cache_v1', '{"current":{}}')

        call_kwargs = mock_client.put_item.call_args.kwargs
        assert call_kwargs['TableName'] == 'test-table'
        assert call_kwargs['Item']['storageKey'] == {'S': 'weather_cache_v1'}
        assert call_kwargs['Item']['value'] == {'S': '{"current":{}}'}
        assert 'updatedAt' in call_kwargs['Item']

    @pytest.mark.asyncio
    async def test_client_errors_propagate(self, storage, mock_client):
        mock_client.get_item.side_effect = RuntimeError("ResourceNotFoundException")

        with pytest.raises(RuntimeError):
            await storage.get_item('weather_cache_v1')

    @pytest.mark.asyncio
    async def test_cleanup_delegates(self, storage, mock_client_manager):
        await storage.cleanup()

        mock_client_manager.cleanup.assert_awaited_once()

    def test_defaults_from_settings(self, mock_client_manager):
        with patch(
            'ust_weather.infrastructure.adapters.output.storage.async_dynamodb_storage.get_dynamodb_client_manager',
            return_value=mock_client_manager
        ) as factory:
            storage = AsyncDynamoDBStorage()

        assert storage.table_name == 'ust-weather-storage'
        assert storage.client_manager is mock_client_manager
        factory.assert_called_once_with(region_name=storage.region_name)


class TestDynamoDBClientManager:

    def setup_method(self):
        DynamoDBClientManager.reset_instance()

    def teardown_method(self):
        DynamoDBClientManager.reset_instance()

    def test_singleton(self):
        first = DynamoDBClientManager.get_instance(region_name='ap-southeast-1')
        second = DynamoDBClientManager.get_instance(region_name='us-east-1')

        assert first is second
        assert first.region_name == 'ap-southeast-1'

    @pytest.mark.asyncio
    async def test_client_reused_in_same_loop(self):
        manager = DynamoDBClientManager()
        client = AsyncMock()
        context_manager = MagicMock()
        context_manager.__aenter__ = AsyncMock(return_value=client)
        context_manager.__aexit__ = AsyncMock(return_value=None)
        manager.session = MagicMock()
        manager.session.client.return_value = context_manager

        assert await manager.get_client() is client
        assert await manager.get_client() is client
        manager.session.client.assert_called_once()

        await manager.cleanup()
        context_manager.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_client_creation_failure(self):
        manager = DynamoDBClientManager()
        manager.session = MagicMock()
        manager.session.client.side_effect = ValueError("invalid region")

        with pytest.raises(RuntimeError, match="Failed to create DynamoDB client"):
            await manager.get_client()
