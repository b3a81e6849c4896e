"""
File Storage - storage chave/valor em um arquivo JSON local

Sobrevive a reinícios do processo. I/O de disco roda fora do event loop
(asyncio.to_thread) e a escrita é atômica (arquivo temporário + os.replace).
"""
import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from ddtrace import tracer

from ust_weather.shared.config import settings


class FileKeyValueStorage:
    """Implementação de IKeyValueStorage em arquivo JSON {chave: valor}"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or settings.STORAGE_FILE_PATH).expanduser()
        # Serializa read-modify-write dentro do processo
        self._lock = asyncio.Lock()

    @tracer.wrap(resource="storage.file.get_item")
    async def get_item(self, key: str) -> Optional[str]:
        entries = await asyncio.to_thread(self._load)
        return entries.get(key)

    @tracer.wrap(resource="storage.file.set_item")
    async def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be strings, got {type(value).__name__}")

        async with self._lock:
            await asyncio.to_thread(self._store, key, value)

    def _load(self) -> Dict[str, str]:
        """
        Lê o arquivo inteiro

        Raises:
            ValueError: Arquivo existe mas não contém um objeto JSON
        """
        if not self.path.exists():
            return {}

        with open(self.path, 'r', encoding='utf-8') as f:
            entries = json.load(f)

        if not isinstance(entries, dict):
            raise ValueError(f"Storage file {self.path} does not contain a JSON object")

        return entries

    def _store(self, key: str, value: str) -> None:
        entries = self._load()
        entries[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix='.storage-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(entries, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise
