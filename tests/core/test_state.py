"""
Tests for ExecutionState and section site identity.
"""

from sectiontree.core import ExecutionState, SectionNode, SectionSite, SectionTable


class TestExecutionState:
    """Test the per-invocation cursor."""

    def test_fresh_state_is_empty(self):
        state = ExecutionState()
        assert state.path_completed is False
        assert state.chain == []
        assert state.active_head is None
        assert state.active_cursor is None

    def test_pop_restores_previous_cursor(self):
        state = ExecutionState()
        outer = SectionNode(site=SectionSite("suite.py", 1), description="outer")
        inner = SectionNode(site=SectionSite("suite.py", 2), description="inner")

        state.push(outer)
        state.push(inner)
        state.pop(inner)

        assert state.active_cursor is outer
        assert state.chain == [outer]

    def test_pop_of_unknown_node_is_ignored(self):
        state = ExecutionState()
        node = SectionNode(site=SectionSite("suite.py", 1), description="a")
        state.pop(node)
        assert state.chain == []


class TestSectionSites:
    """Test that sections are identified by where they are declared."""

    def test_same_site_reuses_node_across_invocations(self):
        table = SectionTable()

        def body(state):
            return state.section("a").node

        first = body(ExecutionState(table))
        second = body(ExecutionState(table))

        assert first is second
        assert len(table) == 1
        assert first.description == "a"
        assert first.file.endswith("test_state.py")

    def test_sections_on_one_line_are_distinct(self):
        table = SectionTable()
        state = ExecutionState(table)

        left, right = state.section("left").node, state.section("right").node

        assert left is not right
        assert left.line == right.line
        assert [node.description for node in table.list_nodes()] == ["left", "right"]

    def test_lookup_by_site_ignores_description(self):
        table = SectionTable()
        node = table.get_or_create(SectionSite("suite.py", 3), "a")

        assert table.get_or_create(SectionSite("suite.py", 3), "renamed") is node
