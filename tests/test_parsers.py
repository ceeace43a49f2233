import math
from fractions import Fraction

import pytest

from scalex.utils.parsers import (
    AbsoluteScale,
    PercentageScale,
    RelativeScale,
    is_inline_kube_flag,
    is_valued_kube_flag,
    parse_integer,
    parse_resource_string,
    parse_scale_expression,
)


def _scale(token: str, current: int):
    expr = parse_scale_expression(token)
    return None if expr is None else expr.apply(current)


@pytest.mark.parametrize("token, current, expected", [
    ("+100%", 10, 20),
    ("-100%", 10, 0),
    ("50%", 40, 60),
    ("+50%", 10, 15),
    ("-50%", 5, 2),
    ("12.5%", 8, 9),
    ("-100%", 42, 0),
    ("3", 10, 13),
    ("+5", 10, 15),
    ("-6", 10, 4),
    ("-2", 5, 3),
])
def test_scale_expression_values(token, current, expected) -> None:
    assert _scale(token, current) == expected


@pytest.mark.parametrize("token", [
    "hello", "%", "+%", "-%", "+", "-", "", "5 ", " 5", "1_0", "inf%", "nan%",
    "1e2%", "--5", "+-5", "5%%", "deployment",
])
def test_non_expressions_do_not_match(token) -> None:
    assert parse_scale_expression(token) is None


def test_percentage_floors_after_multiply() -> None:
    # -250% of 1 is -1.5, floored to -2 rather than truncated to -1
    assert _scale("-250%", 1) == math.floor(1 * -1.5)
    assert _scale("-250%", 1) == -2


def test_percentage_matches_formula() -> None:
    for current in range(0, 201):
        for pct in range(0, 201):
            assert _scale(f"+{pct}%", current) == current * (100 + pct) // 100
            assert _scale(f"-{pct}%", current) == current * (100 - pct) // 100


@pytest.mark.parametrize("token, current, expected", [
    ("+15%", 100, 115),
    ("+14%", 50, 57),
    ("-30%", 90, 63),
    ("+13%", 100, 113),
    ("+0.5%", 200, 201),
])
def test_percentage_is_exact(token, current, expected) -> None:
    assert _scale(token, current) == expected


def test_very_long_percentage_stays_an_integer() -> None:
    magnitude = "1" * 400
    assert _scale(magnitude + "%", 100) == 100 + int(magnitude)


def test_expression_kinds() -> None:
    assert parse_scale_expression("+50%") == PercentageScale(Fraction(3, 2))
    assert parse_scale_expression("-2") == RelativeScale(-2)
    assert parse_scale_expression("7") == RelativeScale(7)


def test_expression_is_pure() -> None:
    expr = parse_scale_expression("+50%")
    assert expr.apply(10) == expr.apply(10) == 15


def test_absolute_ignores_current() -> None:
    expr = AbsoluteScale(7)
    assert expr.apply(0) == 7
    assert expr.apply(3) == 7
    assert expr.apply(1000) == 7


def test_parse_integer() -> None:
    assert parse_integer("7") == 7
    assert parse_integer("+7") == 7
    assert parse_integer("-7") == -7
    assert parse_integer("seven") is None
    assert parse_integer(" 7") is None
    assert parse_integer("7.0") is None
    assert parse_integer("") is None


def test_parse_resource_string() -> None:
    assert parse_resource_string("deployment/api") == ("deployment", "api")
    assert parse_resource_string("api") == ("api", None)


def test_flag() -> None:
    assert is_inline_kube_flag("--namespace=asdfs")
    assert not is_inline_kube_flag("--namespaceasdfs")
    assert not is_inline_kube_flag("--namespace")
    assert not is_inline_kube_flag("-n=prod")
    assert is_inline_kube_flag("--v=4")


def test_valued_flag() -> None:
    assert is_valued_kube_flag("-n")
    assert is_valued_kube_flag("-c")
    assert is_valued_kube_flag("--kubeconfig")
    assert is_valued_kube_flag("--as-group")
    assert not is_valued_kube_flag("--namespace=prod")
    assert not is_valued_kube_flag("--replicas")
    assert not is_valued_kube_flag("-o")
