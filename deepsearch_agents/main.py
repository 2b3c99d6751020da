import time
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .agent_registry import AgentRegistry
from .config import AgentDescriptor, Settings, get_settings
from .logging_config import setup_logging
from .schemas import AgentListResponse, HealthResponse


def create_app(settings: Optional[Settings] = None, registry: Optional[AgentRegistry] = None) -> FastAPI:
    """Build the read-only discovery API over an agent registry."""

    settings = settings or get_settings()
    logger = setup_logging(settings.log_level, settings.log_dir)

    # Loads all agents from the agents package unless one is supplied
    agent_registry = registry or AgentRegistry(settings=settings, logger=logger)

    app = FastAPI(
        title="DeepSearch Agents",
        version="0.1.0",
        description="Exposes agent descriptors for discovery by development harnesses.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.agent_registry = agent_registry

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Request logging middleware with latency capture."""

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            "Handled request",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "client": request.client.host if request.client else None,
            },
        )
        return response

    @app.get("/api/health", response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        return HealthResponse(status="ok", service="deepsearch-agents")

    @app.get("/api/agents", response_model=AgentListResponse)
    async def get_agents() -> AgentListResponse:
        """Get information about all available agents."""
        return AgentListResponse(agents=list(agent_registry.agents.values()))

    @app.get("/api/agents/{name}", response_model=AgentDescriptor)
    async def get_agent(name: str) -> AgentDescriptor:
        try:
            return agent_registry.require_agent(name)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Agent {name} not found")

    return app


def run() -> None:
    import uvicorn

    uvicorn.run("deepsearch_agents.main:create_app", factory=True, log_config=None)
