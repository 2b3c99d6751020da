"""Shared fixtures for the agent descriptor tests."""

import textwrap
import uuid

import pytest

from deepsearch_agents.agent_registry import AgentRegistry
from deepsearch_agents.config import Settings


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_level="INFO")


@pytest.fixture
def registry(settings):
    return AgentRegistry(settings=settings)


@pytest.fixture
def make_agents_package(tmp_path, monkeypatch):
    """Write a throwaway agents package to disk and return its import name."""

    monkeypatch.syspath_prepend(str(tmp_path))

    def _make(modules):
        package_name = f"fake_agents_{uuid.uuid4().hex[:8]}"
        package_dir = tmp_path / package_name
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text("")
        for module_name, source in modules.items():
            (package_dir / f"{module_name}.py").write_text(textwrap.dedent(source))
        return package_name

    return _make
