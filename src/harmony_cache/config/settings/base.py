"""Config settings – Settings base class with range checks for numeric fields."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any

from harmony_cache.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    Subclasses set ``_prefix`` (the environment variable prefix) and override
    :meth:`_validate`, using the ``_require_*`` helpers so every failure is an
    :class:`InvalidSettingValueError` naming the offending field.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add field and cross-field validation."""

    def _require_at_least(self, minimum: float, *names: str) -> None:
        for name in names:
            value = getattr(self, name)
            if value < minimum:
                raise InvalidSettingValueError(name, value, f"must be >= {minimum}")

    def _require_log_level(self, name: str) -> None:
        value = getattr(self, name)
        if not isinstance(logging.getLevelName(str(value).upper()), int):
            raise InvalidSettingValueError(name, value, "not a logging level name")

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["Settings"]
