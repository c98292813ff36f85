"""Fixed data, formulations and input parsing for the Anytown network problem."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from bevarmejo.errors import raise_class_error
from bevarmejo.labels import BEME_NAMESPACE
from bevarmejo.streamio import TokenReader, load_dimensions

NAMESPACE = "anytown::"
PROBLEM_CLASS_NAME = "Problem"

# Hydraulic and operational data of the network.
TREATMENT_PLANT_HEAD_FT = 10.0
MIN_W_LEVEL_TANK_FT = 225.0
MAX_W_LEVEL_TANK_FT = 250.0
BOTTOM_HEIGHT_TANK_FT = 215.0
MIN_PRESSURE_PSI = 40.0
AVERAGE_DAILY_FLOW_MULTIPLIER = 1.0
PEAK_FLOW_MULTIPLIER = 1.3
INSTANTANEOUS_PEAK_FLOW_MULTIPLIER = 1.8
MIN_PRESSURE_FIREFLOW_PSI = 20.0
FIREFLOW_MULTIPLIER = PEAK_FLOW_MULTIPLIER
FIREFLOW_DURATION_HOURS = 2.0

# Parameters of the fitness function.
COEFF_HW_CLEANED = 125.0
COEFF_HW_NEW = 130.0
ENERGY_COST_KWH = 0.12
DISCOUNT_RATE = 0.12
AMORTIZATION_YEARS = 20.0
RISER_LENGTH_FT = 101.0
MAX_N_INSTALLABLE_TANKS = 2
NONEXISTING_PIPE_DIAM_FT = 0.0001

HOURS_PER_DAY = 24
DATA_TAG = "#DATA"
TEMP_ELEMS_LABEL = "TEs"

# Keys of the settings file.
KEY_OPERATIONS = "Operations"
KEY_AVAILABLE_DIAMETERS = "Available diameters"
KEY_TANK_COSTS = "Tank costs"
KEY_WDS = "WDS"
KEY_UDEGS = "UDEGs"
KEY_INP = "inp"

DEFAULT_SUBNETWORKS = (
    "city_pipes.snt",
    "existing_pipes.snt",
    "new_pipes.snt",
    "new_park.snt",
    "possible_tank_locations.snt",
    "residential_pipes.snt",
)


class Formulation(enum.Enum):
    """The formulations of the Anytown problem and their configuration values."""

    REHAB_F1 = "rehab::f1"
    MIXED_F1 = "mixed::f1"
    OPERTNS_F1 = "operations::f1"
    TWOPH_F1 = "twophases::f1"
    REHAB_F2 = "rehab::f2"
    MIXED_F2 = "mixed::f2"

    @classmethod
    def from_value(cls, value: str) -> Formulation:
        """Return the formulation named by a configuration value such as ``rehab::f1``."""
        try:
            return cls(value)
        except ValueError:
            raise_class_error(
                ValueError,
                NAMESPACE + PROBLEM_CLASS_NAME,
                PROBLEM_CLASS_NAME,
                "The provided Anytown formulation is not yet implemented.",
            )

    def _check_supported(self) -> None:
        if self is Formulation.TWOPH_F1:
            raise_class_error(
                ValueError,
                NAMESPACE + PROBLEM_CLASS_NAME,
                PROBLEM_CLASS_NAME,
                "Formulation 1 of twophase problem is not supported anymore.",
            )

    def full_name(self) -> str:
        """Return the fully qualified problem name."""
        self._check_supported()
        return BEME_NAMESPACE + NAMESPACE + self.value

    def extra_info(self) -> str:
        """Return the description of the formulation."""
        self._check_supported()
        return _EXTRA_INFO[self]

    def n_integer_variables(self) -> int:
        """Return the number of integer decision variables."""
        return _N_INTEGER_VARIABLES[self]

    @property
    def is_rehabilitation(self) -> bool:
        return self in (Formulation.REHAB_F1, Formulation.REHAB_F2)


_EXTRA_INFO = {
    Formulation.REHAB_F1: (
        "Anytown Rehabilitation Formulation 1\n"
        "Operations from input, pipes as in Farmani, Tanks as in "
        "Vamvakeridou-Lyroudia but discrete)\n"
    ),
    Formulation.MIXED_F1: (
        "Anytown Mixed Formulation 1\n"
        "Operations as dv, pipes as in Farmani, Tanks as in "
        "Vamvakeridou-Lyroudia but discrete)\n"
    ),
    Formulation.OPERTNS_F1: "Anytown Operations-only problem. Pure 24-h scheduling.\n",
    Formulation.TWOPH_F1: (
        "Anytown Rehabilitation Formulation 1\n"
        "Pipes as in Farmani, Tanks as in Vamvakeridou-Lyroudia but discrete, "
        "operations optimized internally)\n"
    ),
    Formulation.REHAB_F2: (
        "Anytown Rehabilitation Formulation 2\n"
        "Operations from input, pipes as single dv, Tanks as in "
        "Vamvakeridou-Lyroudia (but discrete)\n"
    ),
    Formulation.MIXED_F2: (
        "Anytown Mixed Formulation 2\n"
        "Operations as dv, pipes as single dv, Tanks as in "
        "Vamvakeridou-Lyroudia (but discrete)\n"
    ),
}

_N_INTEGER_VARIABLES = {
    Formulation.REHAB_F1: 80,
    Formulation.TWOPH_F1: 80,
    Formulation.MIXED_F1: 104,
    Formulation.OPERTNS_F1: 24,
    Formulation.REHAB_F2: 45,
    Formulation.MIXED_F2: 69,
}


def _read_fields(reader: TokenReader, count: int) -> list[float]:
    values = []
    for index in range(count):
        try:
            values.append(reader.read_number())
        except EOFError as exc:
            raise ValueError(f"Expected {count} values, found {index}") from exc
        if index < count - 1:
            reader.skip_past(";")
    return values


@dataclass(frozen=True)
class PipeAltCosts:
    """Costs per foot of the alternatives available for a pipe diameter."""

    diameter_in: float
    new_cost: float
    dup_city: float
    dup_residential: float
    clean_city: float
    clean_residential: float

    @classmethod
    def _from_reader(cls, reader: TokenReader) -> PipeAltCosts:
        return cls(*_read_fields(reader, 6))

    @classmethod
    def parse(cls, text: str) -> PipeAltCosts:
        """Parse six ``;``-separated numbers."""
        return cls._from_reader(TokenReader(text))


@dataclass(frozen=True)
class TankCosts:
    """Cost of a tank of a given volume."""

    volume_gal: float
    cost: float

    @classmethod
    def _from_reader(cls, reader: TokenReader) -> TankCosts:
        return cls(*_read_fields(reader, 2))

    @classmethod
    def parse(cls, text: str) -> TankCosts:
        """Parse two ``;``-separated numbers."""
        return cls._from_reader(TokenReader(text))


def _load_table(lines: Iterable[str], element_type: Any) -> list[Any]:
    line_iter = iter(lines)
    count = load_dimensions(line_iter, DATA_TAG)
    reader = TokenReader("\n".join(line_iter))
    reader.skip_past("[")
    rows = []
    for index in range(count):
        rows.append(element_type._from_reader(reader))
        if index < count - 1:
            reader.skip_past(",")
    reader.skip_past("]")
    return rows


def load_pipes_alt_costs(lines: Iterable[str]) -> list[PipeAltCosts]:
    """Load the pipe alternative cost table that follows the ``#DATA n`` tag."""
    return _load_table(lines, PipeAltCosts)


def load_tanks_costs(lines: Iterable[str]) -> list[TankCosts]:
    """Load the tank cost table that follows the ``#DATA n`` tag."""
    return _load_table(lines, TankCosts)


def decompose_pumpgroup_pattern(
    pattern: Sequence[float], n_pumps: int
) -> list[list[float]]:
    """Split a pump-group pattern into one on/off pattern per pump.

    Each pump in turn is switched on in every period where some of the
    group's count is still left.
    """
    remaining = list(pattern)
    patterns = []
    for _ in range(n_pumps):
        pump_pattern = []
        for period, value in enumerate(remaining):
            if value > 0.0:
                pump_pattern.append(1.0)
                remaining[period] = value - 1
            else:
                pump_pattern.append(0.0)
        patterns.append(pump_pattern)
    return patterns


def merge_pump_patterns(patterns: Iterable[Sequence[float]]) -> list[float]:
    """Sum single pump patterns into the pump-group pattern."""
    merged = [0.0] * HOURS_PER_DAY
    for pattern in patterns:
        if len(pattern) != HOURS_PER_DAY:
            raise ValueError(f"A pump pattern must have {HOURS_PER_DAY} values")
        merged = [total + value for total, value in zip(merged, pattern)]
    return merged


def pump_patterns_from_operations(
    operations: Sequence[float], n_pumps: int
) -> list[list[float]]:
    """Turn the daily number of running pumps into one pattern per pump."""
    if len(operations) != HOURS_PER_DAY:
        raise ValueError(f"Operations must have {HOURS_PER_DAY} values")
    return [
        [1.0 if running > pump else 0.0 for running in operations]
        for pump in range(n_pumps)
    ]


def static_params(
    formulation: Formulation, operations: Sequence[float] | None = None
) -> tuple[dict[str, Any], str]:
    """Return the settings that rebuild a problem, plus extra text.

    ``operations`` is the pump-group pattern, required by the rehabilitation
    formulations.
    """
    params: dict[str, Any] = {
        KEY_AVAILABLE_DIAMETERS: "available_diams.txt",
        KEY_TANK_COSTS: "tanks_costs.txt",
    }
    if formulation.is_rehabilitation:
        if operations is None or len(operations) != HOURS_PER_DAY:
            raise ValueError(
                f"Rehabilitation formulations need {HOURS_PER_DAY} operations"
            )
        params[KEY_OPERATIONS] = [float(value) for value in operations]
    params[KEY_WDS] = {
        KEY_INP: "anytown.inp",
        KEY_UDEGS: list(DEFAULT_SUBNETWORKS),
    }
    return params, ""