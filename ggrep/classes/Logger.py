import os
import sys
import threading
from datetime import datetime
import inspect

class Logger:
    """Diagnostics channel: short lines on stderr, full entries in an optional log file."""

    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(self, config=None, stream=None, log_file=None):
        self.stream = stream if stream is not None else sys.stderr
        self.log_file = log_file if log_file is not None else self._get_log_file_from_config(config)
        self.lock = threading.Lock()
        self.level = self._get_level_from_config(config)

    def _get_level_from_config(self, config):
        if config is not None:
            level = (config.get("log_level") or "WARNING").upper()
            return self.LEVELS.get(level, 30)
        return 30  # Default to WARNING

    def _get_log_file_from_config(self, config):
        if config is not None:
            return config.get("log_file") or None
        return None

    def _should_log(self, level):
        return self.LEVELS[level] >= self.level

    def _format(self, level, msg, file, line):
        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return f"[{now}] [{level}] [{file}:{line}] {msg}\n"

    def log(self, level, msg):
        if not self._should_log(level):
            return
        frame = inspect.currentframe().f_back.f_back
        file = os.path.basename(frame.f_code.co_filename)
        line = frame.f_lineno
        with self.lock:
            self.stream.write(f"{msg}\n" if level == "ERROR" else f"{level}: {msg}\n")
            self.stream.flush()
            if self.log_file:
                with open(self.log_file, "a", encoding="utf-8") as f:
                    f.write(self._format(level, msg, file, line))

    def debug(self, msg):
        self.log("DEBUG", msg)

    def info(self, msg):
        self.log("INFO", msg)

    def warning(self, msg):
        self.log("WARNING", msg)

    def error(self, msg):
        self.log("ERROR", msg)
