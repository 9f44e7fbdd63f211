"""LLM utilities: chat model creation and the tool-calling loop.

This module provides integration with langchain for driving a chat
model that answers questions by calling the published graph tools.
"""

from .chat import ChatClient
from .orchestrator import AnswerStrategy, ToolCallingStrategy

__all__ = [
    "AnswerStrategy",
    "ChatClient",
    "ToolCallingStrategy",
]
