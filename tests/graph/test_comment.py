import pytest

from sochat_mcp_server.neo4j import CommentDB


def test_get_comments_returns_comments_on_post(client):
    comments = [
        {"id": "c1", "text": "+1", "postId": "a1", "created": "2024-01-01"},
        {"id": "c2", "text": "thanks", "postId": "a1", "created": "2024-01-02"},
    ]
    client.read.return_value = [{"comment": c} for c in comments]

    results = CommentDB(client).get_comments("a1")

    assert results == comments
    assert all(c["postId"] == "a1" for c in results)
    cypher, params = client.read.call_args.args
    assert params == {"post": "a1"}
    assert "(target)<-[:ON_POST]-(comment:Comment)" in cypher
    assert "postId: elementId(target)" in cypher


def test_get_comments_empty(client):
    client.read.return_value = []

    assert CommentDB(client).get_comments("a1") == []


def test_get_user_comments(client):
    client.read.return_value = [{"comment": {"id": "c1", "postId": "a1"}}]

    assert CommentDB(client).get_user_comments("u1") == [{"id": "c1", "postId": "a1"}]
    cypher, params = client.read.call_args.args
    assert params == {"user": "u1"}
    assert "(comment:Comment)-[:COMMENTED_BY]->(u)" in cypher


def test_blank_ids_are_rejected(client):
    with pytest.raises(ValueError, match="post_id"):
        CommentDB(client).get_comments("")
    with pytest.raises(ValueError, match="user_id"):
        CommentDB(client).get_user_comments(None)
