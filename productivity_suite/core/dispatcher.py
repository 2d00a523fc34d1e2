"""Route a tool call to its handler and wrap the outcome in an envelope."""
import logging

from pydantic import ValidationError

from productivity_suite.core.registry import ToolRegistry, ToolSpec, discover_tools
from productivity_suite.core.results import fail
from productivity_suite.core.store import Workspace

logger = logging.getLogger(__name__)


def format_validation_error(tool_name: str, error: ValidationError) -> str:
    """Flatten pydantic errors into one line: "field: message; field: message"."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "arguments"
        parts.append(f"{loc}: {err['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(parts)


class Dispatcher:
    """
    Stateless request -> response over a workspace.

    call() never raises: unknown tools, bad arguments and handler failures all
    come back as {"success": False, "error": ...}.
    """

    def __init__(self, workspace: Workspace, registry: ToolRegistry | None = None):
        self.workspace = workspace
        self.registry = registry if registry is not None else discover_tools()

    def list_tools(self) -> list[ToolSpec]:
        return self.registry.specs()

    def call(self, name: str, arguments: dict | None = None) -> dict:
        spec = self.registry.get(name)
        if spec is None:
            logger.warning("Unknown tool requested: %s", name)
            return fail(f"Unknown tool: {name}")

        try:
            result = spec.invoke(self.workspace, arguments)
        except ValidationError as e:
            message = format_validation_error(name, e)
            logger.info(message)
            return fail(message)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return fail(str(e))

        if not result.get("success"):
            logger.info("Tool %s returned error: %s", name, result.get("error"))
        return result
