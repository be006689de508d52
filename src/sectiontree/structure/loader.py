"""
Bootstrap step that imports test files so their declarations register.
"""

import importlib.util
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from uuid import uuid4

from sectiontree.exceptions import TestFileLoadError

logger = logging.getLogger(__name__)


def load_test_file(path: str | Path) -> None:
    """
    Import a single Python test file.

    The module is executed under a unique name so files sharing a stem do not
    replace each other in `sys.modules`.

    Params:
        path: Path to a Python source file

    Raises:
        TestFileLoadError: If the file does not exist or fails to import
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise TestFileLoadError(str(path), "no such file")

    module_name = f"_sectiontree_{file_path.stem}_{uuid4().hex[:8]}"
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        raise TestFileLoadError(str(path), "not an importable Python file")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        logger.warning("Failed to import test file %s: %s", path, e)
        raise TestFileLoadError(str(path), f"{type(e).__name__}: {e}") from e


def load_test_files(paths: Iterable[str | Path]) -> None:
    """Import every test file in the given order."""
    for path in paths:
        load_test_file(path)
