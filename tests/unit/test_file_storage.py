"""Testes do FileKeyValueStorage (arquivo JSON local)"""
import json

import pytest

from ust_weather.infrastructure.adapters.output.storage.file_storage import FileKeyValueStorage


class TestFileKeyValueStorage:

    @pytest.mark.asyncio
    async def test_missing_file_returns_none(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / 'storage.json')

        assert await storage.get_item('weather_cache_v1') is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / 'nested' / 'storage.json')

        await storage.set_item('weather_cache_ts_v1', '1748755800000')
        await storage.set_item('weather_cache_v1', '{"current": {}}')

        assert await storage.get_item('weather_cache_ts_v1') == '1748755800000'
        assert await storage.get_item('weather_cache_v1') == '{"current": {}}'

    @pytest.mark.asyncio
    async def test_survives_new_instance(self, tmp_path):
        path = tmp_path / 'storage.json'
        await FileKeyValueStorage(path).set_item('key', 'value')

        assert await FileKeyValueStorage(path).get_item('key') == 'value'
        assert json.loads(path.read_text(encoding='utf-8')) == {'key': 'value'}

    @pytest.mark.asyncio
    async def test_set_replaces_value(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / 'storage.json')

        await storage.set_item('key', 'old')
        await storage.set_item('key', 'new')

        assert await storage.get_item('key') == 'new'
        assert list(tmp_path.glob('.storage-*')) == []

    @pytest.mark.asyncio
    async def test_rejects_non_string_values(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / 'storage.json')

        with pytest.raises(TypeError):
            await storage.set_item('key', 123)

    @pytest.mark.asyncio
    async def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / 'storage.json'
        path.write_text('[1, 2, 3]', encoding='utf-8')

        with pytest.raises(ValueError):
            await FileKeyValueStorage(path).get_item('key')
