# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol

from spritehub.shared.logging import logger


class SessionStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemorySessionStorage:
    """Lives as long as the process, like a browser tab's session storage."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class FileSessionStorage:
    def __init__(self, base_directory: str | Path, filename: str = "session.json") -> None:
        self._base_directory = str(base_directory)
        os.makedirs(self._base_directory, exist_ok=True)
        self._path = os.path.join(self._base_directory, filename)
        logger.debug(f"FileSessionStorage: initialized path={self._path}")

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning(f"FileSessionStorage: unreadable file path={self._path}, ignoring")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, data: dict[str, str]) -> None:
        if not data:
            if os.path.exists(self._path):
                os.remove(self._path)
            return
        tmp_path = self._path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        os.replace(tmp_path, self._path)

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None or not data:
            self._save(data)


__all__ = ["FileSessionStorage", "MemorySessionStorage", "SessionStorage"]
