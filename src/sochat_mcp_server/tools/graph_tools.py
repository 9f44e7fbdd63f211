"""Tools over the Stack Overflow for Teams graph.

This module exposes `PostDB`, `CommentDB` and `UserDB` queries as named,
described tools. Missing optional relations come back from the query
layer as None and are turned into literal replies here, at the boundary
the LLM sees.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Union

from ..neo4j import CommentDB, PostDB, UserDB
from ..prompts import NO_ACCEPTED_ANSWER, NO_PARENT, NO_USER
from .registry import ToolRegistry, ToolSpec
from .utils import log_tool_call, result_count

Record = Dict[str, Any]


class GraphTools:
    """The eight read-only tools published to the tool-calling loop."""

    def __init__(self, postdb: PostDB, commentdb: CommentDB, userdb: UserDB) -> None:
        self.postdb = postdb
        self.commentdb = commentdb
        self.userdb = userdb

    def _run(self, name: str, arguments: Dict[str, Any], query: Callable[[], Any]) -> Any:
        start_time = time.time()
        log_tool_call(name, "called", dict(arguments))

        result = query()

        duration = time.time() - start_time
        log_tool_call(name, "completed", {
            **arguments,
            "result_count": result_count(result),
        }, duration=duration)
        return result

    def find_relevant_questions(self, user_question: str) -> List[Record]:
        """Find relevant questions (topics) using vector search on the user's prompt.

        Use this tool when:
            - You start working on a new user question and need candidate threads.

        Args:
            user_question: The question exactly as asked by the user.

        Returns:
            A list of candidate questions, each with id, title, body, score
            and created.
        """
        return self._run(
            "find_relevant_questions",
            {"user_question": user_question},
            lambda: self.postdb.find_relevant_questions(user_question),
        )

    def retrieve_thread(self, question_id: str) -> List[Record]:
        """For a question, return all posts in that thread (question + answers).

        The list is unsorted; each post has a 'created' field to order by.
        """
        return self._run(
            "retrieve_thread",
            {"question_id": question_id},
            lambda: self.postdb.get_thread(question_id),
        )

    def retrieve_accepted_answer(self, question_id: str) -> Union[Record, str]:
        """For a question, return the accepted answer if present; otherwise 'No accepted answer'."""
        return self._run(
            "retrieve_accepted_answer",
            {"question_id": question_id},
            lambda: _or_reply(self.postdb.get_accepted_answer(question_id), NO_ACCEPTED_ANSWER),
        )

    def retrieve_comments(self, post_id: str) -> List[Record]:
        """Fetch all comments for a specific post (question or answer). May be empty."""
        return self._run(
            "retrieve_comments",
            {"post_id": post_id},
            lambda: self.commentdb.get_comments(post_id),
        )

    def get_user(self, entity_id: str) -> Union[Record, str]:
        """Get the user who posted a question, answer, or comment; otherwise 'No user'."""
        return self._run(
            "get_user",
            {"entity_id": entity_id},
            lambda: _or_reply(self.userdb.get_user(entity_id), NO_USER),
        )

    def get_user_posts(self, user_id: str) -> List[Record]:
        """List all posts (questions and answers) written by the given user."""
        return self._run(
            "get_user_posts",
            {"user_id": user_id},
            lambda: self.postdb.get_user_posts(user_id),
        )

    def get_user_comments(self, user_id: str) -> List[Record]:
        """List all comments written by the given user."""
        return self._run(
            "get_user_comments",
            {"user_id": user_id},
            lambda: self.commentdb.get_user_comments(user_id),
        )

    def get_parent_post(self, entity_id: str) -> Union[Record, str]:
        """Get the parent post for an answer or comment, or 'No parent' if it is a top-level question."""
        return self._run(
            "get_parent_post",
            {"entity_id": entity_id},
            lambda: _or_reply(self.postdb.get_parent_post(entity_id), NO_PARENT),
        )

    def registry(self) -> ToolRegistry:
        """Build a registry holding all eight tools bound to this instance."""
        registry = ToolRegistry()
        for spec in (
            ToolSpec(
                name="find_relevant_questions",
                description="Find relevant questions (topics) using vector search on the user's prompt.",
                func=self.find_relevant_questions,
                parameter="user_question",
                parameter_description="The question exactly as asked by the user",
            ),
            ToolSpec(
                name="retrieve_thread",
                description=(
                    "For a question/topic, return all posts in that thread (question + answers), "
                    "unsorted; each has a 'created' field."
                ),
                func=self.retrieve_thread,
                parameter="question_id",
                parameter_description="Id of the question whose thread should be returned",
            ),
            ToolSpec(
                name="retrieve_accepted_answer",
                description=(
                    "For a question/topic, return the accepted answer if present; "
                    f"otherwise the string '{NO_ACCEPTED_ANSWER}'."
                ),
                func=self.retrieve_accepted_answer,
                parameter="question_id",
                parameter_description="Id of the question to fetch the accepted answer for",
            ),
            ToolSpec(
                name="retrieve_comments",
                description="Fetch all comments for a specific post (question or answer). May be empty.",
                func=self.retrieve_comments,
                parameter="post_id",
                parameter_description="Id of the post whose comments should be fetched",
            ),
            ToolSpec(
                name="get_user",
                description=(
                    "Get the user who posted a question, answer, or comment; "
                    f"the string '{NO_USER}' if no author is found."
                ),
                func=self.get_user,
                parameter="entity_id",
                parameter_description="Id of the post or comment whose author to fetch",
            ),
            ToolSpec(
                name="get_user_posts",
                description="List all posts (questions and answers) written by the given user.",
                func=self.get_user_posts,
                parameter="user_id",
                parameter_description="Id of the user whose posts to return",
            ),
            ToolSpec(
                name="get_user_comments",
                description="List all comments written by the given user.",
                func=self.get_user_comments,
                parameter="user_id",
                parameter_description="Id of the user whose comments to return",
            ),
            ToolSpec(
                name="get_parent_post",
                description=(
                    "Get the parent post for an answer or comment, "
                    f"or '{NO_PARENT}' if it is a top-level question."
                ),
                func=self.get_parent_post,
                parameter="entity_id",
                parameter_description="Id of the answer or comment whose parent post to return",
            ),
        ):
            registry.register(spec)
        return registry


def _or_reply(record: Any, reply: str) -> Union[Record, str]:
    return reply if record is None else record
