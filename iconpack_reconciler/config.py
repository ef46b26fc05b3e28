"""Runtime settings, read from RECONCILER_* environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping

from iconpack_reconciler.domain.constants import MERGE_INDENT, RENAMED_DIR_NAME, REWRITE_INDENT

ENV_PREFIX = 'RECONCILER_'


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")
    if value < 0:
        raise ValueError(f"{ENV_PREFIX}{name} must not be negative, got {value}")
    return value


@dataclass
class Settings:
    """Options shared by the CLI and the web adapter."""

    merge_indent: int = MERGE_INDENT
    rewrite_indent: int = REWRITE_INDENT
    renamed_dir_name: str = RENAMED_DIR_NAME
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ
        return cls(
            merge_indent=_int_setting(env, 'MERGE_INDENT', MERGE_INDENT),
            rewrite_indent=_int_setting(env, 'REWRITE_INDENT', REWRITE_INDENT),
            renamed_dir_name=env.get(ENV_PREFIX + 'RENAMED_DIR') or RENAMED_DIR_NAME,
            log_level=(env.get(ENV_PREFIX + 'LOG_LEVEL') or 'INFO').upper(),
        )
