"""Box bounds of the decision variables of the Anytown formulations."""

from __future__ import annotations

from collections.abc import Sequence

from bevarmejo.anytown_data import (
    HOURS_PER_DAY,
    MAX_N_INSTALLABLE_TANKS,
    Formulation,
    PipeAltCosts,
    TankCosts,
)

N_EXISTING_PIPES = 35
N_NEW_PIPES = 6
N_PUMPS = 3
N_TANK_LOCATIONS = 17
N_PIPE_ALTERNATIVES = 10
N_TANK_VOLUMES = 5

# Actions on an existing pipe in formulation 1: nothing, clean, duplicate.
_N_PIPE_ACTIONS_F1 = 3
# In formulation 2 the actions nothing and clean precede the diameters.
_N_EXTRA_ACTIONS_F2 = 2

Bounds = tuple[list[float], list[float]]


def _check_size(what: str, actual: int, expected: int) -> None:
    if actual != expected:
        raise ValueError(f"Expected {expected} {what}, got {actual}")


def bounds_existing_pipes_f1(
    n_pipes: int, pipes_alt_costs: Sequence[PipeAltCosts]
) -> Bounds:
    """Bounds of ``[action, alternative]`` pairs, one pair per existing pipe."""
    _check_size("existing pipes", n_pipes, N_EXISTING_PIPES)
    _check_size("pipe alternatives", len(pipes_alt_costs), N_PIPE_ALTERNATIVES)

    max_action = float(_N_PIPE_ACTIONS_F1 - 1)
    max_alternative = float(len(pipes_alt_costs) - 1)
    lower = [0.0] * (2 * n_pipes)
    upper = [max_action, max_alternative] * n_pipes
    return lower, upper


def bounds_existing_pipes_f2(
    n_pipes: int, pipes_alt_costs: Sequence[PipeAltCosts]
) -> Bounds:
    """Bounds of a single action per existing pipe (nothing, clean or a diameter)."""
    _check_size("existing pipes", n_pipes, N_EXISTING_PIPES)
    _check_size("pipe alternatives", len(pipes_alt_costs), N_PIPE_ALTERNATIVES)

    n_actions = _N_EXTRA_ACTIONS_F2 + len(pipes_alt_costs)
    return [0.0] * n_pipes, [float(n_actions - 1)] * n_pipes


def bounds_new_pipes(n_pipes: int, pipes_alt_costs: Sequence[PipeAltCosts]) -> Bounds:
    """Bounds of the diameter alternative chosen for each new pipe."""
    _check_size("new pipes", n_pipes, N_NEW_PIPES)
    _check_size("pipe alternatives", len(pipes_alt_costs), N_PIPE_ALTERNATIVES)

    max_alternative = float(len(pipes_alt_costs) - 1)
    return [0.0] * n_pipes, [max_alternative] * n_pipes


def bounds_pumps(n_pumps: int) -> Bounds:
    """Bounds of the number of running pumps in each hour of the day."""
    _check_size("pumps", n_pumps, N_PUMPS)
    return [0.0] * HOURS_PER_DAY, [float(n_pumps)] * HOURS_PER_DAY


def bounds_tanks(n_locations: int, tanks_costs: Sequence[TankCosts]) -> Bounds:
    """Bounds of ``[location, volume]`` pairs, one pair per installable tank.

    Location 0 means no tank, so its upper bound is the number of locations.
    """
    _check_size("possible tank locations", n_locations, N_TANK_LOCATIONS)
    _check_size("tank volumes", len(tanks_costs), N_TANK_VOLUMES)

    max_volume = float(len(tanks_costs) - 1)
    lower = [0.0] * (2 * MAX_N_INSTALLABLE_TANKS)
    upper = [float(n_locations), max_volume] * MAX_N_INSTALLABLE_TANKS
    return lower, upper


def problem_bounds(
    formulation: Formulation,
    pipes_alt_costs: Sequence[PipeAltCosts],
    tanks_costs: Sequence[TankCosts],
    n_existing_pipes: int = N_EXISTING_PIPES,
    n_new_pipes: int = N_NEW_PIPES,
    n_pumps: int = N_PUMPS,
    n_tank_locations: int = N_TANK_LOCATIONS,
) -> Bounds:
    """Return the lower and upper bounds of all decision variables of a formulation."""
    parts: list[Bounds] = []

    if formulation in (
        Formulation.REHAB_F1,
        Formulation.MIXED_F1,
        Formulation.TWOPH_F1,
    ):
        parts.append(bounds_existing_pipes_f1(n_existing_pipes, pipes_alt_costs))
    elif formulation in (Formulation.REHAB_F2, Formulation.MIXED_F2):
        parts.append(bounds_existing_pipes_f2(n_existing_pipes, pipes_alt_costs))

    if formulation is not Formulation.OPERTNS_F1:
        parts.append(bounds_new_pipes(n_new_pipes, pipes_alt_costs))

    if formulation in (
        Formulation.MIXED_F1,
        Formulation.OPERTNS_F1,
        Formulation.MIXED_F2,
    ):
        parts.append(bounds_pumps(n_pumps))

    if formulation is not Formulation.OPERTNS_F1:
        parts.append(bounds_tanks(n_tank_locations, tanks_costs))

    lower = [value for part_lower, _ in parts for value in part_lower]
    upper = [value for _, part_upper in parts for value in part_upper]
    return lower, upper