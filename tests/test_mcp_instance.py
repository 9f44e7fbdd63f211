import asyncio
import importlib

import pytest


@pytest.fixture
def mcp_instance(monkeypatch):
    monkeypatch.setenv("NEO4J_URI", "bolt://localhost:7687")
    monkeypatch.setenv("NEO4J_USERNAME", "neo4j")
    monkeypatch.setenv("NEO4J_PASSWORD", "pw")
    return importlib.import_module("sochat_mcp_server.mcp_instance")


def test_all_graph_tools_are_published(mcp_instance):
    tools = asyncio.run(mcp_instance.mcp.list_tools())

    assert sorted(tool.name for tool in tools) == sorted(mcp_instance.registry.names())
    for tool in tools:
        assert tool.annotations.readOnlyHint is True


def test_answer_prompt_is_published(mcp_instance):
    prompts = asyncio.run(mcp_instance.mcp.list_prompts())

    assert [prompt.name for prompt in prompts] == ["answer_from_graph"]
    assert "Question: why?" in mcp_instance.answer_from_graph("why?")
