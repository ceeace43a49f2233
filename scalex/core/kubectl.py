"""Kubectl command wrapper"""
import shlex
import subprocess
from typing import List, Sequence

from .errors import KubectlError
from .logger import Logger


class KubeCommand:
    """Execute kubectl commands

    Global flags (namespace, context, ...) are passed through verbatim and
    placed before the subcommand, the way the user wrote them.
    """

    def __init__(self, flags: Sequence[str] = (), binary: str = "kubectl", verbose: bool = False):
        self.flags = list(flags)
        self.binary = binary
        self.verbose = verbose
        Logger.verbose = verbose

    def build(self, cmd: List[str]) -> List[str]:
        return [self.binary] + self.flags + cmd

    def format(self, cmd: List[str]) -> str:
        """Shell-ready rendering of the full command line"""
        return shlex.join(self.build(cmd))

    def run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        """Run kubectl, raising KubectlError if it cannot start or fails"""
        full_cmd = self.build(cmd)

        Logger.verbose_log(f"Running: {shlex.join(full_cmd)}")

        try:
            result = subprocess.run(
                full_cmd, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise KubectlError(f"{self.binary} not found: {e}") from e
        except OSError as e:
            raise KubectlError(f"failed to run {self.binary}: {e}") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip()
            msg = f"Command failed: {shlex.join(full_cmd)} (exit code {e.returncode})"
            raise KubectlError(f"{msg}: {detail}" if detail else msg) from e
        return result

    def scale_command(self, target: str, replicas: int) -> List[str]:
        return ["scale", target, f"--replicas={replicas}"]

    def get_replicas(self, target: str) -> int:
        """Current .spec.replicas of a deployment or statefulset"""
        result = self.run([
            "get", target,
            "-o", "custom-columns=REPLICAS:.spec.replicas",
            "--no-headers"
        ])

        output = result.stdout.strip()
        try:
            return int(output)
        except ValueError:
            raise KubectlError(
                f"failed to get number of replicas for {target}: "
                f"unexpected output {output!r}") from None

    def scale(self, target: str, replicas: int):
        self.run(self.scale_command(target, replicas))
