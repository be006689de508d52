"""
Tests for the command line entry point.
"""

from textwrap import dedent

import pytest

from sectiontree.cli import EXIT_FAILED, EXIT_LOAD_ERROR, EXIT_PASSED, main

PASSING = dedent(
    """
    from sectiontree import check, testcase


    @testcase("arithmetic")
    def arithmetic(state):
        with state.section("addition") as entered:
            if entered:
                check(1 + 1 == 2)
        with state.section("subtraction") as entered:
            if entered:
                check(3 - 1 == 2)
    """
)

FAILING = dedent(
    """
    from sectiontree import check, testcase


    @testcase("arithmetic")
    def arithmetic(state):
        with state.section("wrong sum") as entered:
            if entered:
                check(1 + 1 == 3)
    """
)


class TestMain:
    """Test exit codes and diagnostics."""

    def test_passing_files_exit_zero(self, tmp_path, isolated_default_registry, capsys):
        path = tmp_path / "passing.py"
        path.write_text(PASSING)

        assert main([str(path)]) == EXIT_PASSED
        assert capsys.readouterr().err == ""

    def test_failing_file_exits_one(self, tmp_path, isolated_default_registry, capsys):
        path = tmp_path / "failing.py"
        path.write_text(FAILING)

        assert main([str(path)]) == EXIT_FAILED

        err = capsys.readouterr().err
        assert "ASSERTION FAILED\n  1 + 1 == 3" in err
        assert "-> " in err
        assert "wrong sum" in err

    def test_unloadable_file_exits_two(self, tmp_path, isolated_default_registry, capsys):
        assert main([str(tmp_path / "absent.py")]) == EXIT_LOAD_ERROR
        assert "absent.py" in capsys.readouterr().err

    def test_files_are_required(self):
        with pytest.raises(SystemExit):
            main([])
