# logger_utils.py - logging messages and timing metrics for markov_textgen

import os
import sys
import time
from datetime import datetime
from typing import Dict, Optional, TextIO

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight logger for writing messages and tracking metrics.
    Lines look like: [YYYY-MM-DD HH:MM:SS] LEVEL   | name: message
    They go to `stream` (stderr by default, so generated text on stdout stays
    clean) and, when a path is configured, are appended to a log file.
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    # shared settings, changed through Log.configure()
    level = "WARNING"
    path: Optional[str] = None
    use_color = True

    _registry: Dict[str, "Log"] = {}

    def __init__(self, name: str = "markov_textgen", stream: Optional[TextIO] = None):
        self.name = name
        self._stream = stream

    @classmethod
    def get(cls, name: str) -> "Log":
        """Return the shared logger for `name`, creating it on first use."""
        if name not in cls._registry:
            cls._registry[name] = cls(name)
        return cls._registry[name]

    @classmethod
    def configure(cls, level: Optional[str] = None, path: Optional[str] = None,
                  use_color: Optional[bool] = None) -> None:
        if level is not None:
            level = level.upper()
            if level not in LEVELS:
                raise ValueError(f"unknown log level: {level}")
            cls.level = level
        if path is not None:
            cls.path = path or None
        if use_color is not None:
            cls.use_color = use_color

    @property
    def stream(self) -> TextIO:
        # resolved late so pytest's capsys/capfd see the output
        return self._stream if self._stream is not None else sys.stderr

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[Log.level]

    def write(self, level: str, msg: str):
        """Emit one line at `level` if it passes the configured threshold."""
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {self.name}: {msg}"

        if Log.path:
            log_dir = os.path.dirname(Log.path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            with open(Log.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        if Log.use_color and level in self.COLORS:
            self.stream.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            self.stream.write(line + "\n")

    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts) at INFO level.
        Example: chain build done: 0.012s
        """
        Log.get("metrics").info(f"{tag}: {value}{unit}")

    @staticmethod
    def time_block(label):
        """
        Measure how long a block takes and log it as a metric:
            with Log.time_block("chain build"):
                model.init(text, 3)
        """
        return _Timer(label)


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
