"""
Shared test fixtures for the sectiontree test suite.
"""

import io

import pytest

import sectiontree.structure.registry as registry_module
from sectiontree.config import RunConfig
from sectiontree.execution import Runner
from sectiontree.structure import TestCaseRegistry


@pytest.fixture
def registry():
    """Fresh registry so test cases declared in one test do not leak into another."""
    return TestCaseRegistry()


@pytest.fixture
def stream():
    """Captures failure reports written by the runner."""
    return io.StringIO()


@pytest.fixture
def runner(stream):
    return Runner(RunConfig(stream=stream))


@pytest.fixture
def isolated_default_registry(monkeypatch):
    """Replace the process-wide registry for tests that go through it.

    Usage:
        def test_something(isolated_default_registry):
            # @testcase without registry= now lands here
            pass
    """
    fresh = TestCaseRegistry()
    monkeypatch.setattr(registry_module, "default_registry", fresh)
    return fresh
