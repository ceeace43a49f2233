"""Parsing utilities for scale expressions and kubectl arguments"""
import math
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple


SCALABLE_KINDS = ("deployment", "statefulset")

# Flags kubectl accepts on every command. They are forwarded untouched to
# both the replica query and the scale call.
KUBE_SHORT_FLAGS = (
    "-n",  # namespace
    "-c",  # context
)

KUBE_LONG_FLAGS = (
    "--as",
    "--as-group",
    "--cache-dir",
    "--certificate-authority",
    "--client-certificate",
    "--client-key",
    "--cluster",
    "--context",
    "--disable-compression",
    "--insecure-skip-tls-verify",
    "--kubeconfig",
    "--log-flush-frequency",
    "--match-server-version",
    "--namespace",
    "--password",
    "--profile",
    "--profile-output",
    "--server",
    "--tls-server-name",
    "--token",
    "--user",
    "--username",
    "--v",
    "--vmodule",
    "--warnings-as-errors",
)

_DIGITS = re.compile(r"\d+")
_SIGNED_DIGITS = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class ScaleExpression:
    """How to get from the current replica count to the new one"""

    def apply(self, current: int) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class AbsoluteScale(ScaleExpression):
    """Set the replica count to a fixed number (--replicas N)"""
    replicas: int

    def apply(self, current: int) -> int:
        return self.replicas


@dataclass(frozen=True)
class RelativeScale(ScaleExpression):
    """Add (or remove) a fixed number of replicas: '+2', '-3', '4'"""
    delta: int

    def apply(self, current: int) -> int:
        return current + self.delta


@dataclass(frozen=True)
class PercentageScale(ScaleExpression):
    """Multiply the replica count and round down: '+50%', '-25%'

    The factor is kept as an exact fraction so that +15% of 100 is 115.
    """
    factor: Fraction

    def apply(self, current: int) -> int:
        return math.floor(current * self.factor)


def parse_scale_expression(token: str) -> Optional[ScaleExpression]:
    """
    Parse a relative scaling token

    Returns None when the token is not a scale expression; that is not an
    error, the caller decides what to do with it.

    Percentage magnitudes are plain decimals ('50', '12.5', '.5').
    float() would also take exponents ('1e2%'), 'inf' and 'nan'; they are
    deliberately not accepted here.

    Examples:
        >>> parse_scale_expression("+50%").apply(10)
        15
        >>> parse_scale_expression("-2").apply(5)
        3
        >>> parse_scale_expression("hello") is None
        True
    """
    direction = 1
    unsigned = token
    if token.startswith("-"):
        direction = -1
        unsigned = token[1:]
    elif token.startswith("+"):
        unsigned = token[1:]

    if unsigned.endswith("%"):
        magnitude = unsigned[:-1]
        if not _DECIMAL.fullmatch(magnitude):
            return None
        return PercentageScale((100 + direction * Fraction(magnitude)) / 100)

    if not _DIGITS.fullmatch(unsigned):
        return None
    return RelativeScale(direction * int(unsigned))


def parse_integer(value: str) -> Optional[int]:
    """
    Parse an optionally signed decimal integer, None if it is not one

    Unlike int(), surrounding whitespace and underscores are rejected.
    """
    if not _SIGNED_DIGITS.fullmatch(value):
        return None
    return int(value)


def parse_resource_string(resource_str: str) -> Tuple[str, Optional[str]]:
    """
    Parse resource string like 'deployment/api' or 'api'
    Returns: (resource_type, resource_name) or (resource_str, None)

    Examples:
        >>> parse_resource_string("deployment/api")
        ('deployment', 'api')
        >>> parse_resource_string("api")
        ('api', None)
    """
    if '/' in resource_str:
        parts = resource_str.split('/', 1)
        return parts[0], parts[1]
    return resource_str, None


def is_inline_kube_flag(arg: str) -> bool:
    """True for a long kubectl flag carrying its value, e.g. '--namespace=prod'"""
    return any(arg.startswith(flag + "=") for flag in KUBE_LONG_FLAGS)


def is_valued_kube_flag(arg: str) -> bool:
    """True for a kubectl flag whose value is the next argument, e.g. '-n'"""
    return arg in KUBE_SHORT_FLAGS or arg in KUBE_LONG_FLAGS
