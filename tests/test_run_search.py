import zipfile

import pytest

from ggrep.classes.Reporter import Reporter
from ggrep.classes.RunConfig import RunConfig
from ggrep.functions.run_search import run_search

class _RecordingLogger:
    def __init__(self):
        self.errors = []
        self.debugs = []

    def error(self, msg):
        self.errors.append(msg)

    def debug(self, msg):
        self.debugs.append(msg)

def _config(root, pattern, extension, context_lines=1, silent=True):
    settings = {"out_file": str(root / "out.txt"), "root": str(root), "encoding": "utf-8", "silent": False}
    return RunConfig(pattern, extension, context_lines, silent=silent, settings=settings)

def _run(root, config, exclude=()):
    logger = _RecordingLogger()
    with Reporter(config.out_file, verbose=False) as reporter:
        found = run_search(config, reporter, logger, exclude=exclude)
    with open(config.out_file, "rb") as f:
        lines = f.read().decode("utf-8").split("\r\n")[:-1]
    return found, lines, logger

@pytest.fixture
def tree(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.go").write_text("package main\nfunc main() {\n}\n")
    (tmp_path / "readme.txt").write_text("func is a keyword\nnothing\n")
    return tmp_path

def test_run_search_filters_by_extension(tree):
    config = _config(tree, "func", ".go")
    found, lines, logger = _run(tree, config)
    assert found == 1
    assert lines == ["    main.go:2:func main() {"]
    assert logger.errors == []

def test_run_search_all_files(tree):
    config = _config(tree, "func", "-all")
    found, lines, _ = _run(tree, config, exclude=[config.out_file])
    assert lines == ["    readme.txt:1:func is a keyword", "    main.go:2:func main() {"]
    assert found == 2

def test_run_search_context_lines(tree):
    config = _config(tree, "^package", ".go", context_lines=2)
    _, lines, _ = _run(tree, config)
    assert lines == ["    main.go:1:package main", "    main.go:2:func main() {"]

def test_run_search_verbose_notices(tree):
    config = _config(tree, "func", ".go", silent=False)
    logger = _RecordingLogger()
    echoed = []
    with Reporter(config.out_file, verbose=config.verbose, echo=lambda style, msg: echoed.append(msg)) as reporter:
        run_search(config, reporter, logger)
    path = str(tree / "src" / "main.go")
    assert echoed == [f"* Searching in file: '{path}' *", "    main.go:2:func main() {"]

def test_run_search_zip_members(tmp_path):
    with zipfile.ZipFile(tmp_path / "pack.zip", "w") as zf:
        zf.writestr("inner/", "")
        zf.writestr("inner/a.txt", "one\nneedle\ntwo\n")
        zf.writestr("b.txt", "no match\n")
    config = _config(tmp_path, "needle", ".zip", silent=False)
    echoed = []
    logger = _RecordingLogger()
    with Reporter(config.out_file, verbose=True, echo=lambda style, msg: echoed.append(msg)) as reporter:
        found = run_search(config, reporter, logger)
    assert found == 1
    assert echoed == [
        f"* Searching in file: '{tmp_path / 'pack.zip'}' *",
        "*** Scanning compressed file: 'inner/a.txt' ***",
        "    inner/a.txt:2:needle",
        "*** Scanning compressed file: 'b.txt' ***",
    ]
    assert logger.errors == []

def test_run_search_unreadable_file_is_skipped(tree, monkeypatch):
    real_open = open

    def fake_open(path, *args, **kwargs):
        if str(path).endswith("readme.txt"):
            raise PermissionError("denied")
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr("builtins.open", fake_open)
    config = _config(tree, "func", ".txt")
    found, lines, logger = _run(tree, config, exclude=[config.out_file])
    assert found == 0
    assert lines == []
    assert len(logger.errors) == 1
    assert "readme.txt" in logger.errors[0]
