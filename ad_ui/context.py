"""Lazily-initialized dependencies shared by CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from ad_app.api import DashboardSettings, ListService, RestResourceClient, load_settings


@dataclass
class UIContext:
    """Container for CLI services and state, initialized lazily."""

    config_path: Optional[Path] = None

    _settings: Optional[DashboardSettings] = None
    _console: Optional[Console] = None
    _service: Optional[ListService] = None

    def use_config(self, path: Optional[Path]) -> None:
        """Point at another settings file, dropping services built from the old one."""
        self.config_path = path
        self._settings = None
        self._service = None

    @property
    def settings(self) -> DashboardSettings:
        if self._settings is None:
            self._settings = load_settings(self.config_path)
        return self._settings

    @settings.setter
    def settings(self, value: DashboardSettings) -> None:
        self._settings = value

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console()
        return self._console

    @console.setter
    def console(self, value: Console) -> None:
        self._console = value

    @property
    def service(self) -> ListService:
        if self._service is None:
            self._service = RestResourceClient.from_settings(self.settings)
        return self._service

    @service.setter
    def service(self, value: ListService) -> None:
        self._service = value
