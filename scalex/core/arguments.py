"""Command line classification

kubectl-scalex does not use argparse: most of its arguments belong to
kubectl and have to be forwarded in their original order, and the scaling
amount ('+50%', '-2') looks like a flag to argparse.
"""
import textwrap
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import (
    HelpRequested,
    InvalidReplicasError,
    MissingFlagValueError,
    MissingResourceNameError,
    MissingScaleOperationError,
    MissingTargetError,
)
from .logger import Logger
from ..utils.parsers import (
    SCALABLE_KINDS,
    AbsoluteScale,
    ScaleExpression,
    is_inline_kube_flag,
    is_valued_kube_flag,
    parse_integer,
    parse_scale_expression,
)
from ..utils.validators import validate_target


USAGE = textwrap.dedent("""\
    kubectl scalex is a wrapper around kubectl scale, with the added functionality of expressing how much you want
    to scale by instead of specifying a specific number.

    For example, use the following to scale up by 50%:

        kubectl scalex deployment/mything +50%

    Or the following to scale down by two replicas:

        kubectl scalex deployment/mything -2

    The target can also be given as two words:

        kubectl scalex statefulset db +1

    Use --dry-run to print the change and the kubectl command without running it.

    All flags, including --replicas, that work with kubectl-scale will also work with scalex. Use kubectl scale --help for more information.
""")


@dataclass
class ParsedArguments:
    """Result of classifying the command line"""
    target: str
    scale_expression: ScaleExpression
    passthrough_flags: List[str] = field(default_factory=list)
    dry_run: bool = False


def _value_after(args: Sequence[str], index: int) -> Optional[str]:
    if index + 1 < len(args):
        return args[index + 1]
    return None


def parse_args(args: Sequence[str]) -> ParsedArguments:
    """
    Classify the command line (without the program name)

    Raises an ArgumentError subclass for unusable input and HelpRequested
    for --help. Tokens matching nothing are dropped.
    """
    passthrough: List[str] = []
    target = ""
    dry_run = False
    expression: Optional[ScaleExpression] = None

    i = 0
    while i < len(args):
        arg = args[i]
        step = 1

        if arg == "--dry-run":
            dry_run = True

        elif arg in SCALABLE_KINDS:
            name = _value_after(args, i)
            if name is None:
                raise MissingResourceNameError(arg)
            target = f"{arg}/{name}"
            step = 2

        elif arg == "--replicas":
            value = _value_after(args, i)
            if value is None:
                raise MissingFlagValueError(arg)
            replicas = parse_integer(value)
            if replicas is None:
                raise InvalidReplicasError(value)
            expression = AbsoluteScale(replicas)
            step = 2

        elif arg == "--help":
            raise HelpRequested(USAGE)

        elif is_inline_kube_flag(arg):
            passthrough.append(arg)

        elif is_valued_kube_flag(arg):
            value = _value_after(args, i)
            if value is None:
                raise MissingFlagValueError(arg)
            passthrough.extend([arg, value])
            step = 2

        elif validate_target(arg)[0]:
            target = arg

        else:
            parsed = parse_scale_expression(arg)
            if parsed is None:
                Logger.verbose_log(f"Ignoring unrecognized argument: {arg}")
            else:
                expression = parsed

        i += step

    if not target:
        raise MissingTargetError()

    if expression is None:
        raise MissingScaleOperationError()

    return ParsedArguments(
        target=target,
        scale_expression=expression,
        passthrough_flags=passthrough,
        dry_run=dry_run,
    )
