import pytest

from bevarmejo.labels import split, to_kebab_case


def test_kebab_case_of_label():
    assert to_kebab_case("Crossover probability") == "crossover-probability"


def test_kebab_case_capital_run_is_one_word():
    assert to_kebab_case("ID") == "id"


@pytest.mark.parametrize("text", ["already-kebab", "plain", "a-b-c"])
def test_kebab_case_keeps_lowercase_text(text):
    assert to_kebab_case(text) == text


@pytest.mark.parametrize(
    "text", ["Using pool", "Absolute migration rate", "Bemelib version", "Seed"]
)
def test_kebab_case_invariants(text):
    result = to_kebab_case(text)
    assert " " not in result
    assert result == result.lower()
    assert not result.startswith("-")
    assert to_kebab_case(result) == result


def test_kebab_case_empty():
    assert to_kebab_case("") == ""


def test_split_basic():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_split_trailing_delimiter_dropped():
    assert split("a,b,", ",") == ["a", "b"]


def test_split_keeps_inner_and_leading_empty_tokens():
    assert split(",a,,b", ",") == ["", "a", "", "b"]


def test_split_empty_string():
    assert split("", ":") == []


@pytest.mark.parametrize("text", ["Seed: 3", "x:y:z", "no delimiter"])
def test_split_round_trip(text):
    assert ":".join(split(text, ":")) == text