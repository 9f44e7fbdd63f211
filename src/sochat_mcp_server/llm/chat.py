"""Chat model creation using langchain and OpenAI.

This module provides the ChatClient class, which lazily builds the
tool-calling capable chat model used to answer questions.
"""

import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from ..config import Config

logger = logging.getLogger(__name__)


class ChatClient:
    """Generic LangChain chat client wrapper."""

    def __init__(self, config: Config):
        """Initialize chat client with configuration.

        Args:
            config: Application configuration instance.
        """
        self.config = config
        self._chat_model: Optional[BaseChatModel] = None

    @property
    def chat_model(self) -> BaseChatModel:
        """Get or create the chat model instance.

        Returns:
            ChatOpenAI instance, lazily initialized.

        Raises:
            ValueError: If OPENAI_API_KEY is not configured.
        """
        if self._chat_model is None:
            if not self.config.openai_api_key:
                logger.error("OPENAI_API_KEY not set in environment variables or .env file")
                raise ValueError(
                    "OPENAI_API_KEY must be set in environment variables or .env file"
                )
            self._chat_model = ChatOpenAI(
                model=self.config.chat_model_name,
                temperature=self.config.chat_temperature,
                api_key=self.config.openai_api_key,
            )
        return self._chat_model
