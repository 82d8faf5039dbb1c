from contextlib import closing

from ggrep.classes.Searcher import Searcher
from ggrep.classes.SourceEnumerator import OPEN_ERRORS, SourceEnumerator


def run_search(config, reporter, logger, exclude=()):
    """Walk ``config.root`` and report every match; returns the result line count.

    Per-file problems are reported through ``logger`` and never stop the walk.
    """
    searcher = Searcher(config.regex, config.context_lines, logger=logger)
    enumerator = SourceEnumerator(config.root, config.extension, logger=logger, exclude=exclude)
    logger.debug(f"Searching {config.root!r} with {searcher.describe()}")
    found = 0
    for path in enumerator.files():
        if config.verbose:
            reporter.notice(f"* Searching in file: '{path}' *")
        with closing(enumerator.requests(path)) as requests:
            for request in requests:
                if request.member and config.verbose:
                    reporter.notice(f"*** Scanning compressed file: '{request.display_name}' ***")
                found += _scan_request(request, searcher, reporter, logger, config.encoding)
    return found


def _scan_request(request, searcher, reporter, logger, encoding):
    try:
        stream = request.open()
    except OPEN_ERRORS as exc:
        if request.member:
            logger.error(f"{request.path}: cannot open {request.display_name}: {exc}")
        else:
            logger.error(f"{request.path}: {exc}")
        return 0
    with stream:
        results = searcher.scan_stream(stream, request.display_name, encoding=encoding)
    reporter.results(results)
    return len(results)
