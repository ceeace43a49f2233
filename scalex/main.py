#!/usr/bin/env python3

"""
kubectl-scalex entry point
"""

import sys
from typing import Optional, Sequence

from .commands.scale import ScaleCommand
from .core.arguments import parse_args
from .core.colors import Colors
from .core.config import ScalexConfig
from .core.errors import HelpRequested, ScalexError
from .core.kubectl import KubeCommand
from .core.logger import Logger


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    verbose = False
    try:
        config = ScalexConfig.load()
        verbose = config.verbose
        Logger.verbose = verbose

        # Disable colors if requested
        if not config.color:
            Colors.disable()

        args = parse_args(argv)

        kube = KubeCommand(
            flags=args.passthrough_flags,
            binary=config.kubectl,
            verbose=verbose
        )
        ScaleCommand(kube).execute(args)
    except HelpRequested as e:
        print(e.usage, file=sys.stderr, end="")
        return 1
    except ScalexError as e:
        Logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        Logger.error(f"Command failed: {e}")
        if verbose:
            import traceback
            traceback.print_exc()
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
