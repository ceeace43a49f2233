"""Configuration management"""
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

CONFIG_DIR = Path.home() / ".kube-scalex"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

TRUTHY = ("1", "true", "yes", "on")


class ScalexConfig:
    """Settings from the optional config file and the environment

    config.yaml:
        kubectl: /usr/local/bin/kubectl
        verbose: false
        color: true
    """

    def __init__(self, kubectl: str = "kubectl", verbose: bool = False, color: bool = True):
        self.kubectl = kubectl
        self.verbose = verbose
        self.color = color

    @staticmethod
    def config_path() -> Path:
        override = os.environ.get("SCALEX_CONFIG")
        return Path(override) if override else CONFIG_FILE

    @staticmethod
    def load_yaml(filepath: Path) -> dict:
        """Read a YAML mapping, empty dict if the file does not exist"""
        if not filepath.exists():
            return {}
        try:
            data = yaml.safe_load(filepath.read_text())
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load {filepath}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Failed to load {filepath}: expected a mapping")
        return data

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ScalexConfig":
        data = cls.load_yaml(path or cls.config_path())
        config = cls(
            kubectl=str(data.get("kubectl") or "kubectl"),
            verbose=_as_bool(data.get("verbose", False)),
            color=_as_bool(data.get("color", True)),
        )
        config.apply_env()
        return config

    def apply_env(self):
        """Environment variables win over the file"""
        if os.environ.get("SCALEX_KUBECTL"):
            self.kubectl = os.environ["SCALEX_KUBECTL"]
        if "SCALEX_VERBOSE" in os.environ:
            self.verbose = _as_bool(os.environ["SCALEX_VERBOSE"])
        if os.environ.get("NO_COLOR"):
            self.color = False


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)
