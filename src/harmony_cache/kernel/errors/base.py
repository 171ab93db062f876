"""Root error class for the harmony-cache error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is a stable slug for callers to branch on; ``detail`` carries
    the context (setting name, cache name, offending value) as a flat dict,
    and :meth:`log_fields` turns it into structlog keyword arguments::

        except ConfigError as exc:
            logger.error("cache.settings_invalid", **exc.log_fields())
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def log_fields(self) -> dict[str, Any]:
        # detail keys never shadow the error's own fields
        fields = {k: v for k, v in self.detail.items() if k not in ("error_code", "error")}
        fields["error_code"] = self.code
        fields["error"] = self.message
        return fields

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
