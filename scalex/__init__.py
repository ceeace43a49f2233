"""kubectl-scalex: scale Kubernetes workloads by relative amounts"""

__version__ = "0.1.0"
