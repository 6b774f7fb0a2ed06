from __future__ import annotations

from typing import Protocol

from .model import CenterSettings


class CenterSettingsRepository(Protocol):
    def get(self) -> CenterSettings:
        """Return current settings; an unconfigured center yields defaults."""

        raise NotImplementedError
