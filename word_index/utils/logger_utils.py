# logger_utils.py -  for logging messages and timing metrics, timestamps etc

import time
import os
import sys
from datetime import datetime

# Directory where log files are stored (relative to the working directory)
LOG_DIR = "logs"

# Path to the default log file, can be overriden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "word_index.log")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if not self.echo:
            return
        # print to console (color enabled etc)
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
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
        Record a metric (like timing or counts).
        Prints to the console and also logs it to the default file.
        Example: [12:45:02] build_index done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        print(line)
        _append(DEFAULT_LOG_PATH, line)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("build_index"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(label)


def _append(path: str, line: str):
    # write failures go to stderr, never raised
    try:
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        print(f"log write failed ({path}): {e}", file=sys.stderr)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.time()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, record how long it took as a metric."""
        self.elapsed = round(time.time() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")


# shared instance for the package
log = Log()
