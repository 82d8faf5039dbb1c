import re

from ggrep.functions.load_config import load_config
from ggrep.functions.should_process import ALL_FILES

class RunConfig:
    """Read-only settings for one run: CLI arguments over environment settings.

    Compiling the pattern happens here, so a malformed expression raises
    ``re.error`` before anything is opened or scanned.
    """

    def __init__(self, pattern, extension, context_lines=1, silent=False, settings=None):
        self.config = dict(load_config() if settings is None else settings)
        self.config.update({
            "pattern": pattern,
            "extension": extension,
            "context_lines": max(1, int(context_lines)),
            "verbose": not (silent or self.config.get("silent", False)),
        })
        self._regex = re.compile(pattern)

    def __getitem__(self, key):
        return self.config[key]

    def get(self, key, default=None):
        return self.config.get(key, default)

    def as_dict(self):
        return dict(self.config)

    @property
    def regex(self):
        return self._regex

    @property
    def pattern(self):
        return self.config["pattern"]

    @property
    def extension(self):
        return self.config["extension"]

    @property
    def all_files(self):
        return self.config["extension"] == ALL_FILES

    @property
    def context_lines(self):
        return self.config["context_lines"]

    @property
    def verbose(self):
        return self.config["verbose"]

    @property
    def out_file(self):
        return self.config.get("out_file", "out.txt")

    @property
    def root(self):
        return self.config.get("root", ".")

    @property
    def encoding(self):
        return self.config.get("encoding", "utf-8")
