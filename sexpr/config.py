"""
Compiler configuration loaded from lispcss.json.
"""
import json
import os

from pydantic import BaseModel, ValidationError

CONFIG_FILE = "lispcss.json"
DEFAULT_INDENT = "    "


class CompilerConfig(BaseModel):
    strict: bool = False
    indent: str = DEFAULT_INDENT


def config_paths():
    return [CONFIG_FILE, os.path.expanduser("~/.lispcss/config.json")]


def load_config(paths=None):
    """Load the first config file found; fall back to defaults."""
    for p in paths if paths is not None else config_paths():
        if os.path.exists(p):
            try:
                with open(p, "r") as f:
                    return CompilerConfig(**json.load(f))
            except (OSError, ValueError, TypeError, ValidationError):
                return CompilerConfig()
    return CompilerConfig()
