"""Shared fixtures: configuration, mocked Neo4j client and a small in-memory thread."""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from sochat_mcp_server.config import Config
from sochat_mcp_server.neo4j import Neo4jClient


@pytest.fixture
def config() -> Config:
    return Config(
        NEO4J_URI="bolt://localhost:7687",
        NEO4J_USERNAME="neo4j",
        NEO4J_PASSWORD="pw",
        OPENAI_API_KEY="sk-test",
        _env_file=None,
    )


@pytest.fixture
def client(config: Config) -> MagicMock:
    """A Neo4jClient stand-in whose `read` returns canned rows."""
    mock_client = MagicMock(spec=Neo4jClient)
    mock_client.config = config
    mock_client.read.return_value = []
    return mock_client


def _post(post_id: str, post_type: str, score: int, created: str) -> Dict[str, Any]:
    return {
        "id": post_id,
        "postType": post_type,
        "score": score,
        "body": f"body of {post_id}",
        "created": created,
    }


class FakeThreadDB:
    """In-memory stand-in for PostDB, CommentDB and UserDB.

    Holds one thread: question Q1 with answers A1 (accepted) and A2, and
    comment C1 on A1. Q1 and A1 were written by U1, A2 and C1 by U2.
    """

    def __init__(self) -> None:
        self.posts = {
            "Q1": _post("Q1", "question", 10, "2024-01-01T10:00:00Z"),
            "A1": _post("A1", "answer", 7, "2024-01-02T10:00:00Z"),
            "A2": _post("A2", "answer", 3, "2024-01-01T12:00:00Z"),
        }
        self.parent = {"A1": "Q1", "A2": "Q1"}
        self.accepted = {"Q1": "A1"}
        self.comments = {
            "C1": {"id": "C1", "text": "works for me", "postId": "A1",
                   "created": "2024-01-03T10:00:00Z"},
        }
        self.users = {
            "U1": {"id": "U1", "name": "alice", "reputation": 120},
            "U2": {"id": "U2", "name": "bob", "reputation": 45},
        }
        self.author = {"Q1": "U1", "A1": "U1", "A2": "U2", "C1": "U2"}

    # PostDB
    def find_relevant_questions(self, question: str) -> List[Dict[str, Any]]:
        return [{**self.posts["Q1"], "title": "Docker error on build"}]

    def get_thread(self, question_id: str) -> List[Dict[str, Any]]:
        if question_id not in self.posts:
            return []
        ids = {question_id}
        changed = True
        while changed:
            children = {child for child, parent in self.parent.items() if parent in ids}
            changed = not children <= ids
            ids |= children
        return [self.posts[post_id] for post_id in ids]

    def get_accepted_answer(self, question_id: str) -> Optional[Dict[str, Any]]:
        answer_id = self.accepted.get(question_id)
        return self.posts[answer_id] if answer_id else None

    def get_parent_post(self, entity_id: str) -> Optional[Dict[str, Any]]:
        if entity_id in self.comments:
            return self.posts[self.comments[entity_id]["postId"]]
        parent_id = self.parent.get(entity_id)
        return self.posts[parent_id] if parent_id else None

    def get_user_posts(self, user_id: str) -> List[Dict[str, Any]]:
        return [self.posts[pid] for pid, uid in self.author.items()
                if uid == user_id and pid in self.posts]

    # CommentDB
    def get_comments(self, post_id: str) -> List[Dict[str, Any]]:
        return [c for c in self.comments.values() if c["postId"] == post_id]

    def get_user_comments(self, user_id: str) -> List[Dict[str, Any]]:
        return [self.comments[cid] for cid, uid in self.author.items()
                if uid == user_id and cid in self.comments]

    # UserDB
    def get_user(self, entity_id: str) -> Optional[Dict[str, Any]]:
        user_id = self.author.get(entity_id)
        return self.users[user_id] if user_id else None


@pytest.fixture
def thread_db() -> FakeThreadDB:
    return FakeThreadDB()
