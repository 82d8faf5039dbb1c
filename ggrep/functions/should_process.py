ALL_FILES = "-all"

def should_process(name, extension):
    """True when ``name`` passes the extension filter.

    The filter is a plain substring test, not a suffix test: ``.go`` also
    accepts ``notes.go.txt``.
    """
    if extension == ALL_FILES:
        return True
    return extension in name

def is_archive(name):
    return name.lower().endswith(".zip")
