import sys
import threading

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.shortcuts import print_formatted_text
from prompt_toolkit.styles import Style

LINE_END = "\r\n"

STYLE = Style.from_dict({
    "banner": "ansicyan bold",
    "status": "ansiyellow",
    "notice": "ansibrightblack",
    "result": "",
})


def _console_text(message):
    # Surrogate escapes carry raw bytes for the log file; the terminal gets U+FFFD.
    return message.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def _echo(style_name, message):
    print_formatted_text(FormattedText([(style_name, _console_text(message))]), style=STYLE, file=sys.stdout)


class Reporter:
    """Writes the run log and echoes it to the console when verbose.

    Every line ends with CRLF whatever the platform. Writes go through one
    lock, so several producers can share a Reporter.
    """

    def __init__(self, out_file, verbose=True, echo=None):
        self.out_file = out_file
        self.verbose = verbose
        self._echo = echo or _echo
        self.lock = threading.Lock()
        # newline="" keeps "\r\n" exactly as written; surrogateescape writes
        # undecodable input bytes back unchanged.
        self._handle = open(out_file, "w", encoding="utf-8", errors="surrogateescape", newline="")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _write(self, style_name, msg):
        with self.lock:
            if self._handle is None:
                raise ValueError(f"Reporter for {self.out_file} is closed")
            self._handle.write(msg + LINE_END)
            if self.verbose:
                self._echo(style_name, msg)

    def log(self, msg):
        self._write("class:status", msg)

    def log_empty(self):
        self._write("", "")

    def banner(self, msg):
        self._write("class:banner", msg)

    def notice(self, msg):
        self._write("class:notice", msg)

    def result(self, msg):
        self._write("class:result", msg)

    def results(self, lines):
        for line in lines:
            self.result(line)

    def close(self):
        with self.lock:
            if self._handle is None:
                return
            try:
                self._handle.flush()
            finally:
                self._handle.close()
                self._handle = None
