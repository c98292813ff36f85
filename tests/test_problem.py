from bevarmejo.problem import WDSProblem


def test_name_and_extra_info():
    problem = WDSProblem("bevarmejo::anytown::rehab::f1", "Rehabilitation\n")
    assert problem.get_name() == "bevarmejo::anytown::rehab::f1"
    assert problem.get_extra_info() == "Rehabilitation\n"


def test_defaults_are_empty():
    problem = WDSProblem()
    assert problem.get_name() == ""
    assert problem.get_extra_info() == ""


def test_extra_info_defaults_to_empty():
    problem = WDSProblem("only-a-name")
    assert problem.get_name() == "only-a-name"
    assert problem.get_extra_info() == ""