"""Tests for Neo4j connection and read-transaction handling."""

from unittest.mock import MagicMock, patch

import pytest
from neo4j import READ_ACCESS
from neo4j.exceptions import ServiceUnavailable, SessionExpired

from sochat_mcp_server.neo4j import Neo4jClient


def _mock_driver(rows=None, error=None):
    """Driver whose session runs transaction functions against a fake tx."""
    mock_result = MagicMock()
    mock_result.data.return_value = rows or []

    mock_tx = MagicMock()
    if error is not None:
        mock_tx.run.side_effect = error
    else:
        mock_tx.run.return_value = mock_result

    mock_session = MagicMock()
    mock_session.execute_read.side_effect = lambda fn, *args: fn(mock_tx, *args)

    mock_driver = MagicMock()
    mock_driver.session.return_value = mock_session
    return mock_driver, mock_session, mock_tx


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_connect_creates_driver_with_config(mock_gdb, config):
    mock_driver = MagicMock()
    mock_gdb.driver.return_value = mock_driver

    client = Neo4jClient(config=config)
    client.connect()

    mock_gdb.driver.assert_called_once_with(
        "bolt://localhost:7687",
        auth=("neo4j", "pw"),
        max_connection_lifetime=3600,
        max_connection_pool_size=100,
    )
    mock_driver.verify_connectivity.assert_called_once()


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_connect_failure_raises_connection_error(mock_gdb, config):
    mock_driver = MagicMock()
    mock_driver.verify_connectivity.side_effect = ServiceUnavailable("down")
    mock_gdb.driver.return_value = mock_driver

    client = Neo4jClient(config=config)
    with pytest.raises(ConnectionError) as exc_info:
        client.connect()

    assert isinstance(exc_info.value.__cause__, ServiceUnavailable)
    mock_driver.close.assert_called_once()
    assert client._driver is None


def test_connect_requires_password(config):
    config.neo4j_password = ""
    client = Neo4jClient(config=config)

    with pytest.raises(ValueError, match="NEO4J_PASSWORD"):
        client.connect()


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_read_runs_single_statement_in_read_transaction(mock_gdb, config):
    mock_driver, mock_session, mock_tx = _mock_driver([{"post": {"id": "p1"}}])
    mock_gdb.driver.return_value = mock_driver

    client = Neo4jClient(config=config)
    rows = client.read("MATCH (p:Post) RETURN p {.*} AS post", {"id": "p1"})

    assert rows == [{"post": {"id": "p1"}}]
    mock_driver.session.assert_called_once_with(
        database="neo4j", default_access_mode=READ_ACCESS
    )
    mock_tx.run.assert_called_once_with(
        "MATCH (p:Post) RETURN p {.*} AS post", {"id": "p1"}
    )
    mock_session.close.assert_called_once()


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_read_defaults_to_empty_params(mock_gdb, config):
    mock_driver, _, mock_tx = _mock_driver()
    mock_gdb.driver.return_value = mock_driver

    Neo4jClient(config=config).read("RETURN 1")

    mock_tx.run.assert_called_once_with("RETURN 1", {})


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_read_closes_session_and_propagates_data_access_errors(mock_gdb, config):
    mock_driver, mock_session, _ = _mock_driver(error=SessionExpired("connection dropped"))
    mock_gdb.driver.return_value = mock_driver

    client = Neo4jClient(config=config)
    with pytest.raises(SessionExpired):
        client.read("MATCH (")

    mock_session.close.assert_called_once()


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_context_manager_closes_driver(mock_gdb, config):
    mock_driver = MagicMock()
    mock_gdb.driver.return_value = mock_driver

    with Neo4jClient(config=config) as client:
        assert client._driver is mock_driver

    mock_driver.close.assert_called_once()
    assert client._driver is None


@patch("sochat_mcp_server.neo4j.client.GraphDatabase")
def test_verify_connectivity_reports_failure(mock_gdb, config):
    mock_driver = MagicMock()
    mock_driver.verify_connectivity.side_effect = ServiceUnavailable("down")
    mock_gdb.driver.return_value = mock_driver

    assert Neo4jClient(config=config).verify_connectivity() is False
