"""Question answering over the Stack Overflow for Teams graph.

`SOChatAgent.answer` is the single entry point front ends call: it hands
the user's question, the system prompt and the graph tools to an
`AnswerStrategy` and returns whatever text comes back.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import Config
from .llm import AnswerStrategy, ChatClient, ToolCallingStrategy
from .neo4j import CommentDB, Neo4jClient, PostDB, UserDB
from .prompts import FALLBACK_REPLY, SYSTEM_PROMPT
from .tools import GraphTools, ToolRegistry

logger = logging.getLogger(__name__)


class SOChatAgent:
    """Answers developer questions using the graph tools."""

    def __init__(
        self,
        tools: ToolRegistry,
        strategy: AnswerStrategy,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self.tools = tools
        self.strategy = strategy
        self.system_prompt = system_prompt

    @classmethod
    def from_config(
        cls,
        config: Config,
        client: Optional[Neo4jClient] = None,
    ) -> "SOChatAgent":
        """Wire Neo4j queries, tools and the OpenAI chat model from configuration."""
        client = client or Neo4jClient(config=config)
        graph_tools = GraphTools(PostDB(client), CommentDB(client), UserDB(client))
        strategy = ToolCallingStrategy(
            ChatClient(config).chat_model,
            max_tool_rounds=config.max_tool_rounds,
        )
        return cls(graph_tools.registry(), strategy)

    def answer(self, question: str) -> str:
        """Answer a user's question in free text.

        Raises:
            ValueError: If the question is blank.
        """
        if question is None or not question.strip():
            raise ValueError("question must be a non-empty string")

        logger.info("Answering question: %s", question)
        reply = self.strategy.answer(
            question.strip(),
            system_prompt=self.system_prompt,
            tools=self.tools,
        )
        if not reply or not reply.strip():
            logger.info("Strategy returned no text; using fallback reply")
            return FALLBACK_REPLY
        return reply.strip()
