"""Color definitions for terminal output"""


class Colors:
    RED = '\033[91m'
    CYAN = '\033[96m'
    RESET = '\033[0m'

    @classmethod
    def disable(cls):
        """Disable all colors"""
        cls.RED = cls.CYAN = cls.RESET = ''
