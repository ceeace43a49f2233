"""Relative scaling of deployments and statefulsets"""
from ..core.arguments import ParsedArguments
from ..core.errors import InvalidReplicaCountError
from ..core.kubectl import KubeCommand
from ..core.logger import Logger
from ..utils.validators import validate_replica_count


class ScaleCommand:
    """Read current replicas, apply the expression, scale or report"""

    def __init__(self, kube: KubeCommand):
        self.kube = kube

    def execute(self, args: ParsedArguments) -> int:
        current = self.kube.get_replicas(args.target)
        replicas = args.scale_expression.apply(current)
        Logger.verbose_log(
            f"{args.target}: {current} -> {replicas} ({args.scale_expression})")

        valid, error = validate_replica_count(replicas)
        if not valid:
            raise InvalidReplicaCountError(replicas, error)

        if args.dry_run:
            Logger.plain(f"would scale from {current} to {replicas}")
            Logger.plain(self.kube.format(
                self.kube.scale_command(args.target, replicas)))
            return replicas

        self.kube.scale(args.target, replicas)
        Logger.verbose_log(f"Scaled {args.target} to {replicas} replicas")
        return replicas
