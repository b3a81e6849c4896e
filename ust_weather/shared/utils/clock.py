"""
Clock - abstração de "agora" injetável

Use cases e helpers recebem um Clock em vez de chamar datetime.now() direto,
permitindo controlar o tempo nos testes.
"""
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Agora em UTC (timezone-aware)"""
    return datetime.now(timezone.utc)


def ensure_aware(moment: datetime) -> datetime:
    """Naive é tratado como UTC; aware é devolvido sem alteração"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def to_epoch_ms(moment: datetime) -> int:
    """Converte datetime em epoch milliseconds (naive é tratado como UTC)"""
    return int(ensure_aware(moment).timestamp() * 1000)
