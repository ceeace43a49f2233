"""Commands run by the entry point"""

from .scale import ScaleCommand

__all__ = ['ScaleCommand']
