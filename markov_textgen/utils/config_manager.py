# config_manager.py - JSON config manager

import json
import os

from rich.console import Console
from rich.table import Table

from markov_textgen.utils.logger_utils import Log

log = Log.get(__name__)

DEFAULT_PATH = "markov_textgen.json"

DEFAULTS = {
    "order": 3,             # context length used when --order is not given
    "seed": None,           # None -> unseeded generator
    "max_tokens": 0,        # 0 -> no cap on a generated sample
    "samples": 1,
    "strip_newlines": False,
    "log_level": "WARNING",
    "log_path": None,
    "color": True,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _coerce(default, val):
    """Convert a string from the command line to the type of `default`."""
    if not isinstance(val, str):
        return val
    if default is None and val.lower() in ("none", "null"):
        return None
    if isinstance(default, bool):
        low = val.lower()
        if low in _TRUE:
            return True
        if low in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {val!r}")
    if default is None:
        # untyped option (seed, log_path): keep ints as ints
        try:
            return int(val)
        except ValueError:
            return val
    return type(default)(val)


class Config:
    def __init__(self, path=DEFAULT_PATH, create=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                log.warning(f"ignoring unreadable config {self.path}: {e}")
                return
            if not isinstance(loaded, dict):
                log.warning(f"ignoring config {self.path}: top level is not an object")
                return
            self.data.update(loaded)
        elif create:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def show(self, console=None):
        console = console or Console()
        table = Table(title=f"config ({self.path})")
        table.add_column("option")
        table.add_column("value")
        for k, v in self.data.items():
            table.add_row(k, repr(v))
        console.print(table)

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = _coerce(DEFAULTS[key], val)
        self.save()

    def get_int(self, key, minimum=0):
        """
        Integer option as an int. Hand-edited files can hold anything, so a
        value that is not a whole number >= minimum raises ValueError.
        """
        val = self.data.get(key)
        if isinstance(val, bool) or val is None:
            raise ValueError(f"{key} must be an integer, got {val!r}")
        try:
            num = int(val)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {val!r}") from None
        if num < minimum:
            raise ValueError(f"{key} must be >= {minimum}, got {num}")
        return num
