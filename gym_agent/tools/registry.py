"""
Tool registry - name -> (handler, input schema) dispatch for the acting step.

The model only ever names a tool and supplies JSON arguments. Dispatch is a
dictionary lookup followed by pydantic validation; a handler never sees
arguments that failed its schema.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Type

from langchain_core.tools import BaseTool, StructuredTool
from loguru import logger
from pydantic import BaseModel, ValidationError

from gym_agent.catalog.store import CatalogStore
from gym_agent.utils.errors import InvalidToolArgument, ToolExecutionFailure


@dataclass(frozen=True)
class ToolDescriptor:
    """A callable tool as the model sees it: name, description and input schema"""
    name: str
    description: str
    args_schema: Type[BaseModel]
    handler: Callable[[BaseModel], str]


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "arguments"
        problems.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(problems)


class ToolRegistry:
    """Registry of the tools bound to the chat model"""

    def __init__(self, descriptors: Iterable[ToolDescriptor]):
        self._tools: Dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in self._tools:
                raise ValueError(f"Duplicate tool name: {descriptor.name}")
            self._tools[descriptor.name] = descriptor

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name]
        except KeyError:
            raise InvalidToolArgument(
                name, f"unknown tool; available tools: {', '.join(self._tools)}"
            ) from None

    def validate(self, name: str, args: Any) -> BaseModel:
        """Validate raw tool-call arguments against the tool's schema."""
        descriptor = self.get(name)
        if args is None:
            args = {}
        if not isinstance(args, dict):
            raise InvalidToolArgument(name, f"arguments must be an object, got {type(args).__name__}")
        try:
            return descriptor.args_schema.model_validate(args)
        except ValidationError as e:
            raise InvalidToolArgument(name, _format_validation_error(e)) from e

    def execute(self, name: str, args: Any) -> str:
        """
        Validate then invoke a tool.

        Raises:
            InvalidToolArgument: unknown tool or arguments rejected by the schema
            ToolExecutionFailure: handler failed or returned nothing renderable
        """
        validated = self.validate(name, args)
        descriptor = self._tools[name]

        try:
            result = descriptor.handler(validated)
        except (InvalidToolArgument, ToolExecutionFailure):
            raise
        except Exception as e:
            logger.exception(f"Tool '{name}' raised")
            raise ToolExecutionFailure(name, str(e)) from e

        if not isinstance(result, str) or not result.strip():
            raise ToolExecutionFailure(name, "no renderable content")
        return result

    def as_langchain_tools(self) -> List[BaseTool]:
        """StructuredTool wrappers for ``BaseChatModel.bind_tools``."""
        tools = []
        for descriptor in self._tools.values():
            tools.append(
                StructuredTool.from_function(
                    func=self._bound_runner(descriptor.name),
                    name=descriptor.name,
                    description=descriptor.description,
                    args_schema=descriptor.args_schema,
                )
            )
        return tools

    def _bound_runner(self, name: str) -> Callable[..., str]:
        def run(**kwargs) -> str:
            return self.execute(name, kwargs)
        return run


def build_tool_registry(catalog: CatalogStore) -> ToolRegistry:
    """Registry with the three shop tools bound to ``catalog``."""
    from gym_agent.tools.company_tools import company_tool_descriptors
    from gym_agent.tools.product_tools import product_tool_descriptors

    registry = ToolRegistry([
        *product_tool_descriptors(catalog),
        *company_tool_descriptors(catalog),
    ])
    logger.debug(f"Tool registry built: {registry.names}")
    return registry
