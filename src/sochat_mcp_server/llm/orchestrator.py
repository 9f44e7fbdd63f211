"""Boundary to the LLM planning loop.

The agent does not plan on its own: it hands the question, a system
prompt and the tool registry to an `AnswerStrategy`. The default
strategy drives a LangChain chat model with native tool calling; the
model decides which tools to call, in which order and when to stop.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    SystemMessage,
    ToolMessage,
)

from ..tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class AnswerStrategy(Protocol):
    """Given a question and a set of callable tools, produce a final answer."""

    def answer(self, question: str, *, system_prompt: str, tools: ToolRegistry) -> str:
        ...


def _openai_tool(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "function", "function": schema}


def _message_text(message: BaseMessage) -> str:
    """Plain text of a model reply, whether content is a string or content blocks."""
    content = message.content
    if isinstance(content, str):
        return content
    parts: List[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def _encode(result: Any) -> str:
    if isinstance(result, str):
        return result
    # created values are already strings, default=str covers anything else
    return json.dumps(result, default=str)


class ToolCallingStrategy:
    """Tool-calling loop over a LangChain chat model."""

    def __init__(self, chat_model: BaseChatModel, max_tool_rounds: int = 8) -> None:
        if max_tool_rounds < 1:
            raise ValueError("max_tool_rounds must be at least 1")
        self.chat_model = chat_model
        self.max_tool_rounds = max_tool_rounds

    def _execute(self, call: Dict[str, Any], tools: ToolRegistry) -> ToolMessage:
        """Run one requested tool call and wrap its result for the model."""
        name = call.get("name", "")
        call_id = call.get("id") or name
        if name not in tools:
            logger.warning("Model requested unknown tool %r", name)
            return ToolMessage(content=f"Error: unknown tool {name!r}", tool_call_id=call_id)

        spec = tools.get(name)
        args = call.get("args") or {}
        argument = args.get(spec.parameter)
        if argument is None and len(args) == 1:
            argument = next(iter(args.values()))
        if argument is None:
            return ToolMessage(
                content=f"Error: missing argument {spec.parameter!r} for tool {name!r}",
                tool_call_id=call_id,
            )

        try:
            result = tools.call(name, str(argument))
        except ValueError as e:
            # bad argument from the model; let it correct itself
            logger.warning("Tool %s rejected argument %r: %s", name, argument, e)
            return ToolMessage(content=f"Error: {e}", tool_call_id=call_id)
        return ToolMessage(content=_encode(result), tool_call_id=call_id)

    def answer(self, question: str, *, system_prompt: str, tools: ToolRegistry) -> str:
        """Let the model call tools until it produces a text answer.

        Data-access errors raised by a tool propagate to the caller.
        """
        schemas = [_openai_tool(schema) for schema in tools.schemas()]
        model = self.chat_model.bind_tools(schemas)

        messages: List[BaseMessage] = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=question),
        ]

        for round_no in range(1, self.max_tool_rounds + 1):
            response = model.invoke(messages)
            messages.append(response)
            tool_calls = response.tool_calls if isinstance(response, AIMessage) else []
            if not tool_calls:
                logger.info("Answer produced after %d model round(s)", round_no)
                return _message_text(response)

            logger.info(
                "Round %d: model requested %s",
                round_no,
                ", ".join(call["name"] for call in tool_calls),
            )
            for call in tool_calls:
                messages.append(self._execute(call, tools))

        logger.warning(
            "Reached %d tool rounds without an answer; asking for a final reply",
            self.max_tool_rounds,
        )
        final_model = self.chat_model.bind_tools(schemas, tool_choice="none")
        return _message_text(final_model.invoke(messages))
