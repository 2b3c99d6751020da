"""Strategy agent - answers questions about the time and weather in a city."""

from ..config import AgentDescriptor
from ..model_ids import ModelIds

AGENT_NAME = "strategy_agent"

MODEL = ModelIds.GEMINI_2_0_FLASH.value

DESCRIPTION = "Agent to answer questions about the time and weather in a city."

INSTRUCTION = (
    "You are a helpful agent who can answer user questions about the time and weather"
    " in a city."
)


def build() -> AgentDescriptor:
    return AgentDescriptor.create(
        name=AGENT_NAME,
        model=MODEL,
        description=DESCRIPTION,
        instruction=INSTRUCTION,
    )


root_agent = build()
