"""Configuration management for the chat agent, MCP server and Neo4j connection.

Loads configuration from environment variables and an optional .env file
in the project root.

Example .env:

    NEO4J_URI=bolt://localhost:7687
    NEO4J_USERNAME=neo4j
    NEO4J_PASSWORD=your_password_here
    NEO4J_DATABASE=neo4j
    OPENAI_API_KEY=sk-...
    LOG_LEVEL=INFO

The older DB_URI / DB_USER / DB_PWD names are still accepted for the
Neo4j connection.
"""

from typing import Optional

from pydantic import AliasChoices, AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration loaded from environment / .env file.

    We use explicit aliases so the mapping to env vars is obvious and
    easy to consume from scripts.
    """

    # Neo4j configuration
    neo4j_uri: AnyUrl = Field(
        ...,
        validation_alias=AliasChoices("NEO4J_URI", "DB_URI"),
        description="Neo4j connection URI, e.g. bolt://localhost:7687",
    )
    neo4j_username: str = Field(
        ...,
        validation_alias=AliasChoices("NEO4J_USERNAME", "DB_USER"),
        description="Neo4j username",
    )
    neo4j_password: str = Field(
        ...,
        validation_alias=AliasChoices("NEO4J_PASSWORD", "DB_PWD"),
        description="Neo4j password",
    )
    neo4j_database: str = Field(
        "neo4j",
        alias="NEO4J_DATABASE",
        description="Neo4j database holding the Stack Overflow for Teams export",
    )
    neo4j_max_connection_lifetime: int = Field(
        3600,
        alias="NEO4J_MAX_CONNECTION_LIFETIME",
        description="Maximum lifetime of a Neo4j connection in seconds",
    )
    neo4j_max_connection_pool_size: int = Field(
        100,
        alias="NEO4J_MAX_CONNECTION_POOL_SIZE",
        description="Maximum number of connections in the Neo4j pool",
    )

    # Vector search configuration
    post_embedding_index: str = Field(
        "post_embeddings",
        alias="POST_EMBEDDING_INDEX",
        description="Vector index over post bodies",
    )
    title_embedding_index: str = Field(
        "title_embeddings",
        alias="TITLE_EMBEDDING_INDEX",
        description="Vector index over question titles",
    )
    vector_top_k: int = Field(
        2,
        alias="VECTOR_TOP_K",
        description="Nearest neighbours fetched from each vector index",
    )

    # LLM configuration
    openai_api_key: Optional[str] = Field(
        None,
        alias="OPENAI_API_KEY",
        description=(
            "OpenAI API key, used by the chat model and passed to "
            "genai.vector.encode for in-database embeddings"
        ),
    )
    chat_model_name: str = Field(
        "gpt-4o-mini",
        alias="CHAT_MODEL_NAME",
        description="Chat model used to plan tool calls and write the answer",
    )
    chat_temperature: float = Field(
        0.0,
        alias="CHAT_TEMPERATURE",
        description="Sampling temperature for the chat model",
    )
    max_tool_rounds: int = Field(
        8,
        alias="MAX_TOOL_ROUNDS",
        description="Maximum number of model turns that may request tool calls",
    )

    # Server configuration
    mcp_host: str = Field(
        "0.0.0.0",
        alias="MCP_HOST",
        description="Bind address for the MCP server",
    )
    mcp_port: int = Field(
        8000,
        alias="MCP_PORT",
        description="Port for the MCP server",
    )
    log_level: str = Field(
        "INFO",
        alias="LOG_LEVEL",
        description="Log level for server / CLI (e.g. DEBUG, INFO, WARN, ERROR)",
    )
    log_file: str = Field(
        "/tmp/sochat_mcp_server.log",
        alias="LOG_FILE",
        description="Log file used by the MCP server process",
    )

    # Pydantic v2 settings for env loading
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,  # we use explicit aliases, so keep env lookup strict
        extra="ignore",
        populate_by_name=False,
    )
