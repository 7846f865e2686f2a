from __future__ import annotations

from typing import Optional, Protocol

from .model import PayrollSettings


class SettingsRepository(Protocol):
    """Singleton settings row. ``get`` returns None until settings are first saved."""

    def get(self) -> Optional[PayrollSettings]:
        raise NotImplementedError

    def save(self, settings: PayrollSettings) -> None:
        raise NotImplementedError
