"""
Tests for the tool registry - validate-then-invoke dispatch
"""

import pytest
from pydantic import BaseModel

from gym_agent.tools import ToolDescriptor, ToolRegistry, build_tool_registry
from gym_agent.utils.errors import InvalidToolArgument, ToolExecutionFailure


class EchoInput(BaseModel):
    text: str


def _registry(handler):
    return ToolRegistry([
        ToolDescriptor(name="echo", description="Echo text", args_schema=EchoInput, handler=handler),
    ])


@pytest.fixture
def registry(catalog):
    return build_tool_registry(catalog)


def test_registry_exposes_the_three_shop_tools(registry):
    assert registry.names == ["search_product", "get_products", "search_company"]


def test_langchain_tools_carry_schemas(registry):
    tools = {tool.name: tool for tool in registry.as_langchain_tools()}

    assert set(tools) == {"search_product", "get_products", "search_company"}
    assert "query" in tools["search_product"].args
    assert "number" in tools["get_products"].args


def test_execute_search_product(registry):
    result = registry.execute("search_product", {"query": "treadmill"})
    assert "**Cardio Pro T90**" in result


def test_missing_required_argument_is_invalid(registry):
    with pytest.raises(InvalidToolArgument) as exc_info:
        registry.execute("search_product", {})

    assert exc_info.value.tool_name == "search_product"
    assert "query" in exc_info.value.detail


def test_wrong_argument_type_is_invalid(registry):
    with pytest.raises(InvalidToolArgument):
        registry.execute("search_product", {"query": ["treadmill"]})


def test_non_object_arguments_are_invalid(registry):
    with pytest.raises(InvalidToolArgument) as exc_info:
        registry.execute("search_product", "treadmill")
    assert "must be an object" in exc_info.value.detail


def test_unknown_tool_is_invalid(registry):
    with pytest.raises(InvalidToolArgument) as exc_info:
        registry.execute("delete_catalog", {})
    assert "unknown tool" in exc_info.value.detail


def test_get_products_number_default_and_numeric_coercion(registry):
    assert registry.validate("get_products", None).number == "5"
    assert registry.validate("get_products", {"number": 3}).number == "3"


def test_search_company_ignores_missing_arguments(registry, catalog):
    assert registry.execute("search_company", None) == catalog.company.text


def test_handler_exception_becomes_execution_failure():
    def boom(args):
        raise KeyError("missing")

    with pytest.raises(ToolExecutionFailure) as exc_info:
        _registry(boom).execute("echo", {"text": "hi"})
    assert exc_info.value.tool_name == "echo"


def test_blank_output_becomes_execution_failure():
    with pytest.raises(ToolExecutionFailure) as exc_info:
        _registry(lambda args: "   ").execute("echo", {"text": "hi"})
    assert exc_info.value.detail == "no renderable content"


def test_duplicate_tool_names_rejected():
    descriptor = ToolDescriptor(name="echo", description="Echo text", args_schema=EchoInput, handler=lambda a: a.text)

    with pytest.raises(ValueError):
        ToolRegistry([descriptor, descriptor])
