"""Tool registry: name -> spec, discovered from the domain tools modules."""
import importlib
import logging
from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

from productivity_suite.domains import get_domains

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """
    One tool as exposed to the agent.

    handler is a plain domain function called as handler(workspace, **args),
    where args are the validated fields of args_model.
    """
    name: str
    description: str
    input_schema: dict
    args_model: type[BaseModel]
    handler: Callable[..., dict]
    read_only: bool = False
    domain: str = ""

    @property
    def annotations(self) -> dict | None:
        return {"readOnlyHint": True} if self.read_only else None

    def invoke(self, workspace, arguments: dict | None) -> dict:
        """Validate arguments and run the handler. Raises pydantic.ValidationError."""
        args = self.args_model.model_validate(arguments or {})
        return self.handler(workspace, **args.model_dump())


class ToolRegistry:
    def __init__(self, specs: list[ToolSpec] | None = None):
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: ToolSpec) -> ToolSpec:
        if spec.name in self._specs:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._specs[spec.name] = spec
        return spec

    def get(self, name: str) -> ToolSpec | None:
        return self._specs.get(name)

    def specs(self) -> list[ToolSpec]:
        """All tools in registration order."""
        return list(self._specs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)


def discover_tools() -> ToolRegistry:
    """Collect the TOOLS list of every domain tools.py into a registry."""
    registry = ToolRegistry()

    for domain in get_domains():
        module_name = f"productivity_suite.domains.{domain}.tools"
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.warning("Could not load %s: %s", module_name, e)
            continue
        for spec in getattr(module, "TOOLS", []):
            registry.register(spec)

    logger.debug("Discovered %d tools", len(registry))
    return registry
