"""
Settings loaded from the environment.

A .env file in the working directory (or any parent) is read first, so
values can live there instead of the shell:

    BF_TAPE_SIZE=30000
    BF_STEP_LIMIT=0          # 0 means unlimited
    BF_TAPE_POLICY=strict    # strict | wrap
    BF_EOF_POLICY=unchanged  # unchanged | zero | max
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from brainfoam.errors import ConfigError

DEFAULT_TAPE_SIZE = 30000


class TapePolicy(str, Enum):
    STRICT = "strict"
    WRAP = "wrap"


class EofPolicy(str, Enum):
    UNCHANGED = "unchanged"
    ZERO = "zero"
    MAX = "max"


@dataclass(frozen=True)
class Settings:
    tape_size: int = DEFAULT_TAPE_SIZE
    step_limit: Optional[int] = None
    tape_policy: TapePolicy = TapePolicy.STRICT
    eof_policy: EofPolicy = EofPolicy.UNCHANGED


def load_env() -> None:
    load_dotenv(find_dotenv(usecwd=True))


def _int_setting(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")
    return value


def _enum_setting(name: str, enum_cls, default):
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigError(f"{name} must be one of: {choices}; got {raw!r}") from None


def load_settings(use_dotenv: bool = True) -> Settings:
    if use_dotenv:
        load_env()
    step_limit = _int_setting("BF_STEP_LIMIT", 0, 0)
    return Settings(
        tape_size=_int_setting("BF_TAPE_SIZE", DEFAULT_TAPE_SIZE, 1),
        step_limit=step_limit or None,
        tape_policy=_enum_setting("BF_TAPE_POLICY", TapePolicy, TapePolicy.STRICT),
        eof_policy=_enum_setting("BF_EOF_POLICY", EofPolicy, EofPolicy.UNCHANGED),
    )
