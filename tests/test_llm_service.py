"""Tests for turning descriptors into runtime agents."""

from pydantic_ai import Agent

from deepsearch_agents.agents import strategy_agent
from deepsearch_agents.config import AgentDescriptor, Settings
from deepsearch_agents.llm_service import build_runtime_agent, model_string


class TestModelString:
    def test_prefixes_provider(self, settings):
        assert model_string(strategy_agent.root_agent, settings) == "google-gla:gemini-2.0-flash"

    def test_uses_configured_provider(self):
        settings = Settings(_env_file=None, model_provider="google-vertex")

        assert model_string(strategy_agent.root_agent, settings) == "google-vertex:gemini-2.0-flash"

    def test_qualified_model_passes_through(self, settings):
        descriptor = AgentDescriptor.create(
            name="router", model="openai:gpt-4o-mini", description="d", instruction="i"
        )

        assert model_string(descriptor, settings) == "openai:gpt-4o-mini"


class TestBuildRuntimeAgent:
    def test_builds_without_backend(self, settings, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        agent = build_runtime_agent(strategy_agent.root_agent, settings)

        assert isinstance(agent, Agent)
        assert agent.name == "strategy_agent"

    def test_descriptor_is_untouched(self, settings):
        before = strategy_agent.root_agent.model_dump()

        build_runtime_agent(strategy_agent.root_agent, settings)

        assert strategy_agent.root_agent.model_dump() == before
