"""Input validation utilities"""
from typing import Optional

from .parsers import SCALABLE_KINDS, parse_resource_string


def validate_target(target: str) -> tuple[bool, Optional[str]]:
    """
    Validate a 'kind/name' reference to a scalable resource

    Returns: (is_valid, error_message)

    Examples:
        >>> validate_target("deployment/api")
        (True, None)
        >>> validate_target("pod/api")
        (False, "Unsupported kind 'pod'...")
    """
    kind, name = parse_resource_string(target)

    if name is None:
        return False, "Target must be in format kind/name"

    if kind not in SCALABLE_KINDS:
        return False, f"Unsupported kind '{kind}' (expected {' or '.join(SCALABLE_KINDS)})"

    if not name:
        return False, "Name cannot be empty"

    return True, None


def validate_replica_count(replicas: int) -> tuple[bool, Optional[str]]:
    """Replica counts handed to kubectl must not be negative"""
    if replicas < 0:
        return False, f"Replica count {replicas} is negative"
    return True, None
