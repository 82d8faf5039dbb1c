import os
from ggrep.functions.parse_bool import parse_bool

DEFAULT_OUT_FILE = "out.txt"

def load_config():
    """Environment settings for a run; CLI arguments are layered on top by RunConfig."""
    return {
        "out_file": os.environ.get("GGREP_OUT_FILE", DEFAULT_OUT_FILE),
        "root": os.environ.get("GGREP_ROOT", "."),
        "encoding": os.environ.get("GGREP_ENCODING", "utf-8"),
        "log_level": os.environ.get("GGREP_LOG_LEVEL", "WARNING"),
        "log_file": os.environ.get("GGREP_LOG_FILE"),
        "silent": parse_bool(os.environ.get("GGREP_SILENT"), default=False),
    }
