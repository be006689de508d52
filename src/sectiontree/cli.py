"""Process entry point: load test files, run them, map the outcome to an exit code."""

import argparse
import logging
import sys

from sectiontree.exceptions import TestFileLoadError
from sectiontree.execution.runner import run_all
from sectiontree.structure.loader import load_test_files

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sectiontree",
        description="Run section-based test cases declared in Python files.",
    )
    parser.add_argument("files", nargs="+", help="Python files declaring test cases")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the test cases declared in the given files.

    Params:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        0 when every test case passed, 1 when any failed, 2 when a file failed to load
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        load_test_files(args.files)
    except TestFileLoadError as e:
        print(e, file=sys.stderr)
        return EXIT_LOAD_ERROR

    return EXIT_PASSED if run_all() else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
