"""
Tests for importing test files into the registry.
"""

from textwrap import dedent

import pytest

from sectiontree.exceptions import TestFileLoadError
from sectiontree.structure import load_test_file, load_test_files

DECLARING_FILE = dedent(
    """
    from sectiontree import testcase


    @testcase("{name}")
    def body(state):
        pass
    """
)


class TestLoader:
    """Test the bootstrap import step."""

    def test_files_register_in_given_order(self, tmp_path, isolated_default_registry):
        second = tmp_path / "second.py"
        first = tmp_path / "first.py"
        second.write_text(DECLARING_FILE.format(name="from second"))
        first.write_text(DECLARING_FILE.format(name="from first"))

        load_test_files([second, first])

        assert [case.description for case in isolated_default_registry] == [
            "from second",
            "from first",
        ]

    def test_same_stem_in_different_directories(self, tmp_path, isolated_default_registry):
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        (tmp_path / "a" / "cases.py").write_text(DECLARING_FILE.format(name="a"))
        (tmp_path / "b" / "cases.py").write_text(DECLARING_FILE.format(name="b"))

        load_test_files([tmp_path / "a" / "cases.py", tmp_path / "b" / "cases.py"])

        assert len(isolated_default_registry) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(TestFileLoadError) as exc_info:
            load_test_file(tmp_path / "absent.py")

        assert "no such file" in str(exc_info.value)

    def test_import_failure(self, tmp_path):
        broken = tmp_path / "broken.py"
        broken.write_text("raise ImportError('missing dependency')\n")

        with pytest.raises(TestFileLoadError) as exc_info:
            load_test_file(broken)

        assert "ImportError" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, ImportError)
