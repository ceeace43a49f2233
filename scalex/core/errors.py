"""Error types

Every failure the tool can report is a ScalexError subclass whose str() is
the message shown to the user. Only main() turns them into exit codes.
"""


class ScalexError(Exception):
    """Base class for all reportable failures"""


class ArgumentError(ScalexError):
    """Command line could not be classified"""


class MissingFlagValueError(ArgumentError):
    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"expected value for {flag}")


class MissingResourceNameError(ArgumentError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"expected name for {kind}")


class InvalidReplicasError(ArgumentError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid value for --replicas: {value!r}")


class MissingTargetError(ArgumentError):
    def __init__(self):
        super().__init__("missing target (deployment or statefulset)")


class MissingScaleOperationError(ArgumentError):
    def __init__(self):
        super().__init__("scaling operation was not specified")


class HelpRequested(ScalexError):
    """--help was given; carries the usage text instead of a parse result"""

    def __init__(self, usage: str):
        self.usage = usage
        super().__init__(usage)


class KubectlError(ScalexError):
    """kubectl could not be run or gave an unusable answer"""


class InvalidReplicaCountError(ScalexError):
    def __init__(self, replicas: int, reason: str):
        self.replicas = replicas
        super().__init__(reason)


class ConfigError(ScalexError):
    """Config file could not be read"""
