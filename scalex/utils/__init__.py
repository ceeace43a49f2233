"""Utility functions and helpers"""

from .parsers import *
from .validators import *

__all__ = [
    'ScaleExpression',
    'AbsoluteScale',
    'RelativeScale',
    'PercentageScale',
    'parse_scale_expression',
    'parse_integer',
    'parse_resource_string',
    'is_inline_kube_flag',
    'is_valued_kube_flag',
    'KUBE_SHORT_FLAGS',
    'KUBE_LONG_FLAGS',
    'SCALABLE_KINDS',
    'validate_target',
    'validate_replica_count',
]
