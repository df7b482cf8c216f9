"""Configuration for the cusip-tool bulk validator.

Pure configuration data. Environment overrides are parsed into Result
values; a bad setting is reported, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Final, final

from cusip.core.result import Err, Ok

# ---------------------------------------------------------------------------
# Environment variable names
# ---------------------------------------------------------------------------

ENV_LOOSE: Final[str] = "CUSIP_TOOL_LOOSE"
ENV_FAIL_FAST: Final[str] = "CUSIP_TOOL_FAIL_FAST"
ENV_LOG_LEVEL: Final[str] = "CUSIP_TOOL_LOG_LEVEL"

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


def _parse_flag(name: str, raw: str) -> Ok[bool] | Err[str]:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return Ok(True)
    if lowered in _FALSE:
        return Ok(False)
    return Err(f"{name} must be a boolean flag, got {raw!r}")


def parse_log_level(raw: str) -> Ok[str] | Err[str]:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        return Err(f"log level must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return Ok(level)


@final
@dataclass(frozen=True, slots=True)
class ToolConfig:
    """How cusip-tool reads and judges its input lines."""

    loose: bool = False          # parse_loose instead of strict parse
    fail_fast: bool = False      # stop at the first rejected line
    log_level: str = "WARNING"
    skip_blank: bool = True      # blank lines are neither valid nor rejected

    @staticmethod
    def from_env(environ: Mapping[str, str]) -> Ok[ToolConfig] | Err[str]:
        """Defaults overridden by CUSIP_TOOL_* variables present in environ."""
        config = ToolConfig()
        if ENV_LOOSE in environ:
            match _parse_flag(ENV_LOOSE, environ[ENV_LOOSE]):
                case Ok(loose):
                    config = replace(config, loose=loose)
                case Err(e):
                    return Err(e)
        if ENV_FAIL_FAST in environ:
            match _parse_flag(ENV_FAIL_FAST, environ[ENV_FAIL_FAST]):
                case Ok(fail_fast):
                    config = replace(config, fail_fast=fail_fast)
                case Err(e):
                    return Err(e)
        if ENV_LOG_LEVEL in environ:
            match parse_log_level(environ[ENV_LOG_LEVEL]):
                case Ok(level):
                    config = replace(config, log_level=level)
                case Err(e):
                    return Err(f"{ENV_LOG_LEVEL}: {e}")
        return Ok(config)


def configure_logging(config: ToolConfig) -> None:
    """Route the cusip loggers to stderr at config.log_level."""
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
