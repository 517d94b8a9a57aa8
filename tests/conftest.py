"""
Shared fixtures: a small catalog and a scripted chat model.

The scripted model replays a fixed list of responses, one per model call, so
agent tests run without network access.
"""

import asyncio
import json
import re
from typing import Any, Iterator, List, Optional

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, AIMessageChunk, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatGenerationChunk, ChatResult
from langchain_core.utils.function_calling import convert_to_openai_tool
from langgraph.checkpoint.memory import MemorySaver
from pydantic import Field

from gym_agent.agents.shop import ShopAgent
from gym_agent.catalog import CatalogStore, CompanyProfile, Product


class ScriptedChatModel(BaseChatModel):
    """Chat model returning pre-scripted responses; an Exception entry is raised"""

    responses: List[Any] = Field(default_factory=list)
    calls: List[dict] = Field(default_factory=list)
    position: int = 0

    @property
    def _llm_type(self) -> str:
        return "scripted"

    def bind_tools(self, tools, **kwargs):
        return self.bind(tools=[convert_to_openai_tool(tool) for tool in tools], **kwargs)

    def _next_response(self, messages: List[BaseMessage], kwargs: dict) -> AIMessage:
        tool_names = [tool["function"]["name"] for tool in kwargs.get("tools") or []]
        self.calls.append({"messages": list(messages), "tools": tool_names})

        if self.position >= len(self.responses):
            raise RuntimeError("Scripted chat model has no responses left")
        response = self.responses[self.position]
        self.position += 1

        if isinstance(response, Exception):
            raise response
        return response.model_copy()

    def _generate(self, messages, stop=None, run_manager=None, **kwargs) -> ChatResult:
        message = self._next_response(messages, kwargs)
        return ChatResult(generations=[ChatGeneration(message=message)])

    def _stream(self, messages, stop=None, run_manager=None, **kwargs) -> Iterator[ChatGenerationChunk]:
        message = self._next_response(messages, kwargs)
        pieces = [piece for piece in re.split(r"(?<=\s)", message.content or "") if piece]

        for piece in pieces:
            yield ChatGenerationChunk(message=AIMessageChunk(content=piece))

        if message.tool_calls:
            yield ChatGenerationChunk(
                message=AIMessageChunk(
                    content="",
                    tool_call_chunks=[
                        {"name": call["name"], "args": json.dumps(call["args"]), "id": call["id"], "index": index}
                        for index, call in enumerate(message.tool_calls)
                    ],
                )
            )
        elif not pieces:
            yield ChatGenerationChunk(message=AIMessageChunk(content=""))


class SlowScriptedChatModel(ScriptedChatModel):
    """Scripted model that yields to the event loop before answering"""

    delay: float = 0.05

    async def _agenerate(self, messages, stop=None, run_manager=None, **kwargs) -> ChatResult:
        await asyncio.sleep(self.delay)
        return self._generate(messages, stop=stop, **kwargs)


def tool_call(name: str, args: Optional[dict] = None, call_id: str = "call_1") -> dict:
    return {"name": name, "args": args or {}, "id": call_id, "type": "tool_call"}


def ai_tool_calls(*calls: dict) -> AIMessage:
    return AIMessage(content="", tool_calls=list(calls))


def ai_text(text: str) -> AIMessage:
    return AIMessage(content=text)


@pytest.fixture
def catalog():
    """Four products in a fixed order plus a company profile"""
    products = [
        Product(
            name="Cardio Pro T90",
            category="Cardio",
            description="Commercial treadmill with 15-level incline.",
            specs={"Motor": "5.0 HP AC", "Max User": "180kg"},
            warranty=("5 Years Motor",),
            shipping=("Free delivery in Butwal Valley",),
            price="रू 3,25,000",
        ),
        Product(
            name="Shakti Multi-Station MS5",
            category="Multi-Station",
            description="Five-station gym with a 100kg weight stack.",
            specs={"Stack": "100kg"},
            warranty=("10 Years Frame",),
        ),
        Product(
            name="Budget Walker W10",
            category="Cardio",
            description="Folding treadmill for home use.",
            specs={"Motor": "2.0 HP DC"},
        ),
        Product(
            name="Adjustable Bench AB120",
            category="Accessories",
            description="Flat, incline and decline bench.",
        ),
    ]
    company = CompanyProfile(text="Wellness Fitness Center, Traffic Chowk, Butwal. Prices exclude 13% VAT.")
    return CatalogStore(products, company)


@pytest.fixture
def make_agent(catalog):
    """Factory building a ShopAgent around a scripted model and an in-memory checkpointer"""

    def _make(responses, **kwargs):
        llm = ScriptedChatModel(responses=list(responses))
        kwargs.setdefault("checkpointer", MemorySaver())
        kwargs.setdefault("system_prompt", "You are a test shop assistant.")
        agent = ShopAgent(llm=llm, catalog=catalog, **kwargs)
        return agent, llm

    return _make
