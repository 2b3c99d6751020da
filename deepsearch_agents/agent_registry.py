"""Agent registry - discovers agent descriptors and indexes them by name."""

import importlib
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .config import AgentDescriptor, Settings
from .errors import ConfigurationError

ROOT_AGENT_ATTR = "root_agent"


class AgentRegistry:
    """Registry that discovers agents in the agents package and serves them by name."""

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None, autoload: bool = True):
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.agents: Dict[str, AgentDescriptor] = {}

        if autoload:
            self.load()

    def load(self) -> None:
        """Import every agent module and register its published descriptor."""
        package_name = self.settings.agents_package
        package = importlib.import_module(package_name)
        agents_dir = Path(package.__file__).parent

        for agent_file in sorted(agents_dir.glob("*.py")):
            if agent_file.name.startswith("_"):
                continue

            module_name = f"{package_name}.{agent_file.stem}"
            try:
                module = importlib.import_module(module_name)
            except ConfigurationError as e:
                self.logger.error(f"Failed to load agent {module_name}: {e}")
                raise

            descriptor = getattr(module, ROOT_AGENT_ATTR, None)
            if descriptor is None:
                raise ConfigurationError(
                    f"Agent module {module_name} does not publish {ROOT_AGENT_ATTR}",
                    fields=[ROOT_AGENT_ATTR],
                )
            if not isinstance(descriptor, AgentDescriptor):
                raise ConfigurationError(
                    f"{module_name}.{ROOT_AGENT_ATTR} is {type(descriptor).__name__}, "
                    "expected AgentDescriptor",
                    fields=[ROOT_AGENT_ATTR],
                )

            self.register(descriptor)

    def register(self, descriptor: AgentDescriptor) -> AgentDescriptor:
        if descriptor.name in self.agents:
            raise ConfigurationError(f"Duplicate agent name: {descriptor.name}", fields=["name"])
        self.agents[descriptor.name] = descriptor
        self.logger.info(
            f"Registered agent: {descriptor.name}",
            extra={"agent": descriptor.name, "model": descriptor.model},
        )
        return descriptor

    def get_agent(self, name: str) -> Optional[AgentDescriptor]:
        """Get an agent by name."""
        return self.agents.get(name)

    def require_agent(self, name: str) -> AgentDescriptor:
        """Get an agent by name, raising KeyError if it is not registered."""
        try:
            return self.agents[name]
        except KeyError:
            raise KeyError(f"agent {name} not found") from None

    def names(self) -> List[str]:
        return list(self.agents)

    def list_agents(self) -> Dict[str, dict]:
        """List all available agents with their metadata."""
        return {name: agent.model_dump() for name, agent in self.agents.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.agents

    def __len__(self) -> int:
        return len(self.agents)
