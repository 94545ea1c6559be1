from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping

from stylegate.errors import StyleGateError

_ENV_PREFIX = "STYLEGATE_"
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class StyleGateConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    max_css_bytes: int = 100_000  # request bodies beyond this get a 413
    log_level: str = "WARNING"
    default_target_level: str = "AA"
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StyleGateConfig:
        """Read ``STYLEGATE_<FIELD>`` variables, e.g. ``STYLEGATE_PORT=8080``.

        Unset variables keep their defaults; unparsable ones raise
        :class:`StyleGateError`.
        """
        environ = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        for f in fields(cls):
            raw = environ.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            kwargs[f.name] = _coerce(f.name, f.type, raw)
        return cls(**kwargs)


def _coerce(name: str, type_name: object, raw: str) -> object:
    # Annotations are strings under ``from __future__ import annotations``.
    if type_name in (int, "int"):
        try:
            return int(raw)
        except ValueError:
            raise StyleGateError(f"{_ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}") from None
    if type_name in (bool, "bool"):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise StyleGateError(f"{_ENV_PREFIX}{name.upper()} must be a boolean, got {raw!r}")
    return raw
