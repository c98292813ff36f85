# bevarmejo

Building blocks for the Anytown water distribution system optimisation
benchmark: the problem formulations, the pipe and tank cost tables, pump-group
patterns, box bounds of the decision variables, and small helpers for reading
data files and describing optimiser settings.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

- `bevarmejo.anytown_data`: the `Formulation` enum (`rehab::f1`, `mixed::f1`,
  `operations::f1`, `twophases::f1`, `rehab::f2`, `mixed::f2`) with
  `from_value`, `full_name`, `extra_info` and `n_integer_variables`
  (`twophases::f1` is recognised but `full_name` and `extra_info` raise
  `ValueError` for it, as it is no longer supported); the `PipeAltCosts` and
  `TankCosts` records with `parse`, and `load_pipes_alt_costs` /
  `load_tanks_costs` for tables that follow a `#DATA n` tag; the pump helpers
  `decompose_pumpgroup_pattern`, `pump_patterns_from_operations` and
  `merge_pump_patterns`; and `static_params`, which returns the settings that
  describe a problem.
- `bevarmejo.anytown_bounds`: box bounds per block of decision variables
  (`bounds_existing_pipes_f1`, `bounds_existing_pipes_f2`, `bounds_new_pipes`,
  `bounds_pumps`, `bounds_tanks`) and `problem_bounds` for a whole
  formulation. Sizes that do not match the Anytown network raise `ValueError`.
- `bevarmejo.problem`: `WDSProblem`, a base holding a problem's name and
  extra information.
- `bevarmejo.streamio`: `TokenReader`, a lenient cursor that reads numbers,
  words and `[a, b, c]` lists from text; `load_dimensions` for `#DATA`-style
  tags; `format_value` and `format_param` for plain text output.
- `bevarmejo.udc_params`: `Nsga2Settings` and `nsga2_settings` (defaults for
  any missing key), and the parsers `nsga2_static_params`,
  `thread_island_static_params` and `migration_static_params` that turn
  optimiser description strings into parameter dictionaries.
- `bevarmejo.labels`: the keys used in configuration and output files,
  `to_kebab_case` and `split`.
- `bevarmejo.errors`: uniform error messages (`format_class_error`,
  `format_function_error`) and `raise_class_error` / `raise_function_error`.

## Example

```python
from bevarmejo.anytown_data import (
    Formulation,
    TankCosts,
    decompose_pumpgroup_pattern,
)
from bevarmejo.anytown_bounds import bounds_pumps

formulation = Formulation.from_value("rehab::f2")
print(formulation.full_name())             # bevarmejo::anytown::rehab::f2
print(formulation.n_integer_variables())   # 45

print(decompose_pumpgroup_pattern([2, 0, 3], 3))
# [[1.0, 0.0, 1.0], [1.0, 0.0, 1.0], [0.0, 0.0, 1.0]]

print(TankCosts.parse("50000; 115000"))
# TankCosts(volume_gal=50000.0, cost=115000.0)

lower, upper = bounds_pumps(3)
print(upper[:3])                           # [3.0, 3.0, 3.0]
```

## What this package does not do

It has no hydraulic network model or simulator, so it does not evaluate a
decision vector: it does not apply pipe, pump or tank changes to a network,
compute design or energy costs, compute the reliability objective or the net
present value, and does not run an optimiser. It provides no command-line
program and no library version handling.