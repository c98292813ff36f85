"""Settings and parameter extraction for optimisation components."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bevarmejo.labels import SEED, split, to_kebab_case

DEFAULT_GEN = 1
DEFAULT_CR = 0.9
DEFAULT_ETA_C = 15.0
DEFAULT_M = 1.0 / 34.0
DEFAULT_ETA_M = 7.0

CR_LABEL = "Crossover probability"
ETA_C_LABEL = "Distribution index for crossover"
M_LABEL = "Mutation probability"
ETA_M_LABEL = "Distribution index for mutation"
_FLOAT_LABELS = frozenset({CR_LABEL, ETA_C_LABEL, M_LABEL, ETA_M_LABEL})

POOL_FLAG_LABEL = "Using pool"
ABSOLUTE_MIGRATION_LABEL = "Absolute migration rate"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"Not an integer: {token!r}")
    return int(match.group(1))


def _leading_float(token: str) -> float:
    match = _LEADING_FLOAT.match(token)
    if match is None:
        raise ValueError(f"Not a number: {token!r}")
    return float(match.group(1))


def _key_value(extra_info: str) -> list[str]:
    tokens = split(extra_info.replace("\t", ""), ":")
    if len(tokens) != 2:
        raise ValueError(f"Expected 'key: value', got {extra_info!r}")
    return tokens


@dataclass(frozen=True)
class Nsga2Settings:
    """Parameters of an NSGA-II run."""

    gen: int = DEFAULT_GEN
    cr: float = DEFAULT_CR
    eta_c: float = DEFAULT_ETA_C
    m: float = DEFAULT_M
    eta_m: float = DEFAULT_ETA_M
    seed: int | None = None


def nsga2_settings(settings: Mapping[str, Any]) -> Nsga2Settings:
    """Build NSGA-II settings from a configuration mapping, using defaults."""
    gen = int(settings.get("Report gen", DEFAULT_GEN))
    if gen < 0:
        raise ValueError("'Report gen' must not be negative")
    seed = settings.get(SEED)
    if seed is not None:
        seed = int(seed)
        if seed < 0:
            raise ValueError("'Seed' must not be negative")
    return Nsga2Settings(
        gen=gen,
        cr=float(settings.get("cr", DEFAULT_CR)),
        eta_c=float(settings.get("eta_c", DEFAULT_ETA_C)),
        m=float(settings.get("m", DEFAULT_M)),
        eta_m=float(settings.get("eta_m", DEFAULT_ETA_M)),
        seed=seed,
    )


def nsga2_static_params(extra_info: str) -> tuple[dict[str, Any], str]:
    """Split an NSGA-II description into known parameters and leftover text."""
    params: dict[str, Any] = {}
    leftover: list[str] = []
    for line in split(extra_info.replace("\t", ""), "\n"):
        tokens = split(line, ":") or [""]
        key = tokens[0]
        if key in _FLOAT_LABELS:
            if len(tokens) != 2:
                raise ValueError(f"Expected 'key: value', got {line!r}")
            params[to_kebab_case(key)] = _leading_float(tokens[1])
        elif key == SEED:
            if len(tokens) != 2:
                raise ValueError(f"Expected 'key: value', got {line!r}")
            params[to_kebab_case(key)] = _leading_int(tokens[1])
        else:
            leftover.append(":".join(tokens) + "\n")
    return params, "".join(leftover)


def thread_island_static_params(extra_info: str) -> dict[str, bool]:
    """Extract the pool flag from a thread-island description."""
    _, value = _key_value(extra_info)
    return {to_kebab_case(POOL_FLAG_LABEL): value == " yes"}


def migration_static_params(extra_info: str) -> dict[str, int | float]:
    """Extract the migration rate from a replacement or selection policy."""
    key, value = _key_value(extra_info)
    if key == ABSOLUTE_MIGRATION_LABEL:
        return {to_kebab_case(key): _leading_int(value)}
    return {to_kebab_case(key): _leading_float(value)}