"""
Testes do AutoRefreshService (refresh periódico)
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from ust_weather.application.services.auto_refresh_service import AutoRefreshService
from ust_weather.domain.exceptions import ExhaustedFallbackException


@pytest.fixture
def cached_use_case():
    mock = MagicMock()
    mock.execute = AsyncMock()
    return mock


class TestRefreshNow:

    @pytest.mark.asyncio
    async def test_updates_state_and_notifies(self, cached_use_case, make_weather_data, fake_clock):
        weather = make_weather_data()
        cached_use_case.execute.return_value = weather
        on_update = MagicMock()
        service = AutoRefreshService(cached_use_case, on_update=on_update, clock=fake_clock)

        result = await service.refresh_now()

        assert result is weather
        assert service.last_data is weather
        assert service.last_updated == fake_clock.now
        assert service.last_error is None
        on_update.assert_called_once_with(weather)

    @pytest.mark.asyncio
    async def test_failure_keeps_last_data(self, cached_use_case, make_weather_data, fake_clock):
        weather = make_weather_data()
        cached_use_case.execute.side_effect = [weather, ExhaustedFallbackException()]
        service = AutoRefreshService(cached_use_case, clock=fake_clock)

        await service.refresh_now()
        with pytest.raises(ExhaustedFallbackException):
            await service.refresh_now()

        assert service.last_data is weather
        assert isinstance(service.last_error, ExhaustedFallbackException)


class TestLoop:

    @pytest.mark.asyncio
    async def test_refreshes_every_interval_and_survives_failures(self, cached_use_case, make_weather_data):
        cached_use_case.execute.side_effect = [
            make_weather_data(),
            ExhaustedFallbackException(),
            make_weather_data(),
        ]
        delays = []
        third_sleep = asyncio.Event()

        async def fake_sleep(seconds):
            delays.append(seconds)
            if len(delays) == 3:
                third_sleep.set()
                await asyncio.Event().wait()  # bloqueia até stop()

        service = AutoRefreshService(cached_use_case, sleep=fake_sleep)
        service.start()
        await asyncio.wait_for(third_sleep.wait(), timeout=1)

        assert service.is_running
        assert cached_use_case.execute.await_count == 3
        assert delays == [600, 600, 600]

        await service.stop()
        assert not service.is_running

    @pytest.mark.asyncio
    async def test_survives_unexpected_refresh_error(self, cached_use_case, make_weather_data):
        cached_use_case.execute.side_effect = [
            RuntimeError("boom"),
            make_weather_data(),
            make_weather_data(),
        ]
        delays = []
        third_sleep = asyncio.Event()

        async def fake_sleep(seconds):
            delays.append(seconds)
            if len(delays) == 3:
                third_sleep.set()
                await asyncio.Event().wait()

        service = AutoRefreshService(cached_use_case, sleep=fake_sleep)
        service.start()
        await asyncio.wait_for(third_sleep.wait(), timeout=1)

        assert service.is_running
        assert cached_use_case.execute.await_count == 3
        assert service.last_data is not None

        await service.stop()

    @pytest.mark.asyncio
    async def test_survives_failing_update_callback(self, cached_use_case, make_weather_data):
        cached_use_case.execute.return_value = make_weather_data()
        on_update = MagicMock(side_effect=ValueError("listener bug"))
        second_sleep = asyncio.Event()
        sleeps = []

        async def fake_sleep(seconds):
            sleeps.append(seconds)
            if len(sleeps) == 2:
                second_sleep.set()
                await asyncio.Event().wait()

        service = AutoRefreshService(cached_use_case, on_update=on_update, sleep=fake_sleep)
        service.start()
        await asyncio.wait_for(second_sleep.wait(), timeout=1)

        assert service.is_running
        assert on_update.call_count == 2

        await service.stop()

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self, cached_use_case, make_weather_data):
        cached_use_case.execute.return_value = make_weather_data()
        blocked = asyncio.Event()

        async def fake_sleep(seconds):
            await blocked.wait()

        service = AutoRefreshService(cached_use_case, interval_seconds=5, sleep=fake_sleep)
        service.start()
        first_task = service._task
        service.start()

        assert service._task is first_task
        await service.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self, cached_use_case):
        await AutoRefreshService(cached_use_case).stop()
