"""Config settings – ExporterSettings for the dataset download pipeline."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from grant_tracker.config.settings.base import Settings
from grant_tracker.config.validation import InvalidSettingValueError, MissingRequiredSettingError
from grant_tracker.kernel.encoding import Alphabet

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class ExporterSettings(Settings):
    """Environment-driven configuration, read from ``GRANT_TRACKER_*`` variables."""

    _prefix: ClassVar[str] = "GRANT_TRACKER"

    source_url: str = ""
    source_path: str = ""
    payload_key: str = "data"
    alphabet: str = Alphabet.STANDARD.value
    output_dir: str = "."
    filename: str = "asylum_decisions.csv"
    timestamped: bool = False
    fetch_timeout: float = 0.0
    log_level: str = "INFO"

    @classmethod
    def env_var(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper()

    def _invalid(self, field_name: str, value: object, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(field_name, value, reason, env_var=self.env_var(field_name))

    def _validate(self) -> None:
        try:
            Alphabet.parse(self.alphabet)
        except ValueError as exc:
            raise self._invalid("alphabet", self.alphabet, str(exc)) from exc
        if self.fetch_timeout < 0:
            raise self._invalid("fetch_timeout", self.fetch_timeout, "must not be negative")
        if not self.filename or "/" in self.filename or "\\" in self.filename:
            raise self._invalid("filename", self.filename, "must be a bare file name")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise self._invalid("log_level", self.log_level, "unknown level")
        if self.source_url and self.source_path:
            raise self._invalid(
                "source_url", self.source_url, f"{self.env_var('source_path')} is also set"
            )

    def require_source(self) -> None:
        """Raise unless exactly one dataset source is configured."""
        if not (self.source_url or self.source_path):
            raise MissingRequiredSettingError(self.env_var("source_url"), self.env_var("source_path"))

    @property
    def timeout_seconds(self) -> float | None:
        return self.fetch_timeout or None


__all__ = ["ExporterSettings"]
