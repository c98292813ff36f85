import pytest

from bevarmejo.anytown_data import (
    KEY_OPERATIONS,
    KEY_WDS,
    Formulation,
    PipeAltCosts,
    TankCosts,
    decompose_pumpgroup_pattern,
    load_pipes_alt_costs,
    load_tanks_costs,
    merge_pump_patterns,
    pump_patterns_from_operations,
    static_params,
)


@pytest.mark.parametrize("formulation", list(Formulation))
def test_from_value_round_trip(formulation):
    assert Formulation.from_value(formulation.value) is formulation


def test_from_value_unknown_raises():
    with pytest.raises(ValueError, match="not yet implemented"):
        Formulation.from_value("rehab::f9")


def test_full_name():
    assert Formulation.REHAB_F1.full_name() == "bevarmejo::anytown::rehab::f1"
    assert Formulation.MIXED_F2.full_name().endswith("mixed::f2")


def test_twophase_not_supported():
    with pytest.raises(ValueError, match="not supported anymore"):
        Formulation.TWOPH_F1.full_name()
    with pytest.raises(ValueError):
        Formulation.TWOPH_F1.extra_info()


def test_extra_info_mentions_formulation():
    assert Formulation.OPERTNS_F1.extra_info().startswith("Anytown Operations-only")
    assert "Formulation 2" in Formulation.REHAB_F2.extra_info()


@pytest.mark.parametrize(
    "formulation, expected",
    [
        (Formulation.REHAB_F1, 80),
        (Formulation.TWOPH_F1, 80),
        (Formulation.MIXED_F1, 104),
        (Formulation.OPERTNS_F1, 24),
        (Formulation.REHAB_F2, 45),
        (Formulation.MIXED_F2, 69),
    ],
)
def test_n_integer_variables(formulation, expected):
    assert formulation.n_integer_variables() == expected


def test_pipe_alt_costs_parse():
    row = PipeAltCosts.parse("6; 12.8; 26.2; 14.2; 17.0; 12.0")
    assert row == PipeAltCosts(6.0, 12.8, 26.2, 14.2, 17.0, 12.0)


def test_pipe_alt_costs_parse_too_short():
    with pytest.raises(ValueError):
        PipeAltCosts.parse("6; 12.8; 26.2")


def test_tank_costs_parse():
    assert TankCosts.parse("50000; 115000") == TankCosts(50000.0, 115000.0)


def test_load_pipes_alt_costs():
    lines = [
        "# pipe costs",
        "#DATA 2",
        "[6; 12.8; 26.2; 14.2; 17.0; 12.0,",
        "8; 17.8; 27.8; 19.5; 17.0; 12.0]",
    ]
    rows = load_pipes_alt_costs(lines)
    assert rows == [
        PipeAltCosts(6.0, 12.8, 26.2, 14.2, 17.0, 12.0),
        PipeAltCosts(8.0, 17.8, 27.8, 19.5, 17.0, 12.0),
    ]


def test_load_tanks_costs():
    lines = ["#DATA 2", "[50000; 115000,", "100000; 145000]"]
    assert load_tanks_costs(lines) == [
        TankCosts(50000.0, 115000.0),
        TankCosts(100000.0, 145000.0),
    ]


def test_load_without_tag_raises():
    with pytest.raises(ValueError, match="not found"):
        load_tanks_costs(["[50000; 115000]"])


def test_decompose_pumpgroup_pattern_fills_first_pumps():
    pattern = [3.0, 2.0, 0.0, 1.0]
    patterns = decompose_pumpgroup_pattern(pattern, 3)
    assert patterns[0] == [1.0, 1.0, 0.0, 1.0]
    assert patterns[2] == [1.0, 0.0, 0.0, 0.0]
    assert pattern == [3.0, 2.0, 0.0, 1.0]


def test_decompose_caps_at_number_of_pumps():
    patterns = decompose_pumpgroup_pattern([5.0, 1.0], 2)
    assert [sum(col) for col in zip(*patterns)] == [2.0, 1.0]


def test_decompose_then_merge_round_trip():
    pattern = [float(h % 4) for h in range(24)]
    assert merge_pump_patterns(decompose_pumpgroup_pattern(pattern, 3)) == pattern


def test_pump_patterns_from_operations_matches_decompose():
    operations = [float((h * 7) % 4) for h in range(24)]
    assert pump_patterns_from_operations(operations, 3) == decompose_pumpgroup_pattern(
        operations, 3
    )


def test_pump_patterns_from_operations_wrong_length():
    with pytest.raises(ValueError):
        pump_patterns_from_operations([1.0] * 10, 3)


def test_merge_wrong_length_raises():
    with pytest.raises(ValueError):
        merge_pump_patterns([[1.0, 0.0]])


def test_static_params_rehab_includes_operations():
    operations = [1.0] * 24
    params, extra = static_params(Formulation.REHAB_F1, operations)
    assert params[KEY_OPERATIONS] == operations
    assert params[KEY_WDS]["inp"] == "anytown.inp"
    assert "existing_pipes.snt" in params[KEY_WDS]["UDEGs"]
    assert extra == ""


def test_static_params_mixed_has_no_operations():
    params, _ = static_params(Formulation.MIXED_F1)
    assert KEY_OPERATIONS not in params
    assert params["Available diameters"] == "available_diams.txt"
    assert params["Tank costs"] == "tanks_costs.txt"


def test_static_params_rehab_requires_operations():
    with pytest.raises(ValueError):
        static_params(Formulation.REHAB_F2)