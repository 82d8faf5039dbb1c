VERSION = "0.1"
AUTHOR = "@ramayac, 2025"
BANNER_WIDTH = 40

def _boxed(text=""):
    return f"*{text.ljust(BANNER_WIDTH - 2)}*"

def build_banner(version=VERSION, author=AUTHOR):
    border = "*" * BANNER_WIDTH
    return [
        border,
        _boxed(),
        _boxed(f"   Go Grep, version {version}"),
        _boxed(),
        _boxed(f" Author: {author}"),
        border,
    ]
