import logging
from typing import Optional

from pydantic_ai import Agent

from .config import AgentDescriptor, Settings


def model_string(descriptor: AgentDescriptor, settings: Settings) -> str:
    """Qualify the descriptor's model with the configured provider prefix."""
    if ":" in descriptor.model:
        return descriptor.model
    return f"{settings.model_provider}:{descriptor.model}"


def build_runtime_agent(
    descriptor: AgentDescriptor,
    settings: Settings,
    logger: Optional[logging.Logger] = None,
) -> Agent:
    """Create a PydanticAI agent for a descriptor without contacting the model backend.

    Model resolution is deferred to the first run, so no credentials are
    needed until the harness actually exercises the agent.
    """
    logger = logger or logging.getLogger(__name__)
    model_str = model_string(descriptor, settings)

    agent = Agent(
        model_str,
        name=descriptor.name,
        system_prompt=descriptor.instruction,
        defer_model_check=True,
    )

    logger.info(
        f"Initialized runtime agent: {descriptor.name}",
        extra={"agent": descriptor.name, "model": model_str},
    )
    return agent
