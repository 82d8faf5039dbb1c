import argparse
import re
import sys
import time

from ggrep.classes.Logger import Logger
from ggrep.classes.Reporter import Reporter
from ggrep.classes.RunConfig import RunConfig
from ggrep.functions.build_banner import VERSION, build_banner
from ggrep.functions.load_config import load_config
from ggrep.functions.run_search import run_search
from ggrep.functions.should_process import ALL_FILES

FLAG_ARGS = ("-s", "--silent", "-h", "--help", "--version")
HELP_ARGS = ("-h", "--help", "--version")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ggrep",
        description="Recursive regex search through files and zip archives.",
        usage="%(prog)s regex [ext|-all] [lines] [workers] [-s]",
    )
    parser.add_argument("pattern", help="Regular expression to search for")
    parser.add_argument("extension", help=f"Substring the file name must contain, or {ALL_FILES} for every file")
    parser.add_argument("lines", nargs="?", type=int, default=1, help="Lines printed per match, the match included (default: 1)")
    parser.add_argument("workers", nargs="?", type=int, default=None, help="Accepted for compatibility; files are scanned one at a time")
    parser.add_argument("-s", "--silent", action="store_true", help="Write the log file only, no console echo")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def parse_args(argv):
    """Parse the positional command line; the first two words are always pattern and extension.

    Flags are only picked out after them, so "-s" can be searched for and
    "-all" reaches argparse as a value behind a "--".
    """
    if argv[:1] and argv[0] in HELP_ARGS:
        return build_parser().parse_args(argv[:1])
    head, tail = list(argv[:2]), list(argv[2:])
    flags = [arg for arg in tail if arg in FLAG_ARGS]
    positionals = head + [arg for arg in tail if arg not in FLAG_ARGS]
    return build_parser().parse_args(flags + ["--"] + positionals)


def _start_line(config):
    return (
        f"Starting search for '{config.pattern}', "
        f"VERBOSE: {str(config.verbose).lower()}, lines : {config.context_lines}"
    )


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = load_config()
    logger = Logger(config=settings)

    if not args.pattern.strip():
        logger.error("Missing regular expression or search string")
        return 1
    if not args.extension.strip():
        logger.error("Missing file extension")
        return 1

    lines = args.lines
    if lines < 1:
        logger.warning(f"Lines must be >= 1, got {lines}; using 1")
        lines = 1
    if args.workers is not None:
        logger.debug(f"Ignoring workers={args.workers}; files are scanned sequentially")

    try:
        config = RunConfig(args.pattern, args.extension, lines, silent=args.silent, settings=settings)
    except re.error as exc:
        logger.error(f"Error in regex: {exc}")
        return 1
    if config.all_files:
        logger.warning("All found files will be processed")

    try:
        reporter = Reporter(config.out_file, verbose=config.verbose)
    except OSError as exc:
        logger.error(f"Cannot create {config.out_file}: {exc}")
        return 1

    with reporter:
        for line in build_banner():
            reporter.banner(line)
        reporter.log_empty()

        started = time.monotonic()
        reporter.log(_start_line(config))
        found = run_search(config, reporter, logger, exclude=(config.out_file, sys.argv[0]))
        logger.info(f"{found} result lines written to {config.out_file}")

        elapsed_ms = int((time.monotonic() - started) * 1000)
        reporter.log_empty()
        reporter.log(f"Finished ({elapsed_ms} ms)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
