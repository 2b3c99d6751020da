from typing import List

from pydantic import BaseModel, Field

from .config import AgentDescriptor


class HealthResponse(BaseModel):
    status: str
    service: str


class AgentListResponse(BaseModel):
    agents: List[AgentDescriptor] = Field(..., description="Registered agent descriptors in discovery order.")
