"""Parfile (TOML) configuration for the command line tool."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_FRACTION = "5/121"

KNOWN_KEYS = ("fractions", "verbose")


@dataclass
class ParfileConfig:
    fractions: List[str] = field(default_factory=list)
    verbose: bool = False


def _as_token(value) -> str:
    # bool is an int subclass; reject it before the int branch.
    if isinstance(value, bool):
        raise ConfigError(f"fractions entries must be strings or integers, got {value!r}")
    if isinstance(value, int):
        return str(value) + "/1"
    if isinstance(value, str):
        return value
    raise ConfigError(f"fractions entries must be strings or integers, got {value!r}")


def parse_parfile(params: dict) -> ParfileConfig:
    """Validate a decoded parfile mapping."""
    for key in params:
        if key not in KNOWN_KEYS:
            logger.warning("ignoring unknown parfile key %r", key)

    fractions = params.get("fractions", [])
    if isinstance(fractions, (str, int)) and not isinstance(fractions, bool):
        fractions = [fractions]
    if not isinstance(fractions, list):
        raise ConfigError(f"'fractions' must be a list, got {type(fractions).__name__}")

    verbose = params.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError(f"'verbose' must be a boolean, got {verbose!r}")

    return ParfileConfig(fractions=[_as_token(item) for item in fractions], verbose=verbose)


def load_parfile(path: Union[str, Path]) -> ParfileConfig:
    """Read and validate the TOML parfile at *path*."""
    parfile = Path(path).expanduser()
    try:
        with parfile.open("rb") as f:
            params = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Parfile not found: {parfile}") from None
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Parfile {parfile} is not valid TOML: {exc}") from exc
    logger.debug("loaded parfile %s", parfile)
    return parse_parfile(params)


__all__ = ["DEFAULT_FRACTION", "ParfileConfig", "load_parfile", "parse_parfile"]
