"""
Neo4j helpers for post-level queries.

Posts are either questions or answers. Answers point at the question
they address through ``PARENT``; a question may point at one answer
through ``ACCEPTED_ANSWER``; every post points at its author through
``POSTED_BY``.

Important: this module assumes the Neo4j client/connection is
managed by the caller. It does NOT create or manage connections,
only uses the provided client to run read transactions.
"""

from typing import Any, Dict, List, Optional

from .base import GraphDB
from .client import Neo4jClient
from .projection import column, first_or_none, post_projection, question_projection


class PostDB(GraphDB):
    """Low-level Neo4j post query helpers backed by a Neo4jClient."""

    def __init__(
        self,
        client: Neo4jClient,
        *,
        api_key: Optional[str] = None,
        post_index: Optional[str] = None,
        title_index: Optional[str] = None,
        top_k: Optional[int] = None,
    ) -> None:
        """Initialize the PostDB with a shared Neo4j client.

        Vector search settings default to the client's configuration.

        Args:
            client: Shared Neo4j client.
            api_key: Embedding provider credential handed to
                ``genai.vector.encode``.
            post_index: Name of the vector index over post bodies.
            title_index: Name of the vector index over question titles.
            top_k: Nearest neighbours fetched from each index.
        """
        super().__init__(client)
        config = client.config
        self.api_key = api_key if api_key is not None else config.openai_api_key
        self.post_index = post_index or config.post_embedding_index
        self.title_index = title_index or config.title_embedding_index
        self.top_k = top_k if top_k is not None else config.vector_top_k

    def find_relevant_questions(self, question: str) -> List[Dict[str, Any]]:
        """Find candidate questions semantically close to a user's question.

        The question text is embedded inside the database and matched
        against two vector indexes:

        1. post bodies: each hit is walked up its ``PARENT`` chain to the
           root question that started the thread
        2. question titles: hits are questions already

        Both candidate sets are unioned and each question is returned
        once, ordered by its best similarity score.

        Args:
            question: The question exactly as asked by the user.

        Returns:
            List of question records:
                {"id", "title", "body", "score", "created"}

        Raises:
            ValueError: If the question is blank or no embedding API key
                is configured.
        """
        text = self._require(question, "question")
        if not self.api_key:
            raise ValueError(
                "OPENAI_API_KEY must be set to run vector search over posts"
            )

        params: Dict[str, Any] = {
            "question": text,
            "apiKey": self.api_key,
            "postIndex": self.post_index,
            "titleIndex": self.title_index,
            "topK": self.top_k,
        }

        cypher = f"""
        WITH genai.vector.encode($question, "OpenAI", {{token: $apiKey}}) AS embedding
        CALL {{
            WITH embedding
            CALL db.index.vector.queryNodes($postIndex, $topK, embedding)
            YIELD node AS hit, score
            MATCH (hit)((:Post)-[:PARENT]->(:Post))*(question:Post)
            WHERE NOT (question)-[:PARENT]->(:Post)
            RETURN question, score
            UNION
            WITH embedding
            CALL db.index.vector.queryNodes($titleIndex, $topK, embedding)
            YIELD node AS question, score
            RETURN question, score
        }}
        WITH question, max(score) AS relevance
        ORDER BY relevance DESC
        RETURN {question_projection('question')} AS question
        """

        rows = self.client.read(cypher, params)
        return column(rows, "question")

    def get_thread(self, question_id: str) -> List[Dict[str, Any]]:
        """Return every post in a thread: the question plus all its answers.

        Follows ``PARENT`` edges backwards from the question, transitively.
        The list is unsorted; sort on ``created`` when order matters.

        Args:
            question_id: Element id of the question.

        Returns:
            List of post records:
                {"id", "score", "body", "postType", "created"}
        """
        qid = self._require(question_id, "question_id")

        cypher = f"""
        MATCH (q:Post) WHERE elementId(q) = $question
        MATCH (q)((:Post)<-[:PARENT]-(:Post))*(post:Post)
        RETURN DISTINCT {post_projection('post')} AS post
        """

        rows = self.client.read(cypher, {"question": qid})
        return column(rows, "post")

    def get_accepted_answer(self, question_id: str) -> Optional[Dict[str, Any]]:
        """Return the accepted answer of a question, or None if it has none."""
        qid = self._require(question_id, "question_id")

        cypher = f"""
        MATCH (q:Post) WHERE elementId(q) = $question
        OPTIONAL MATCH (q)-[:ACCEPTED_ANSWER]->(post:Post)
        RETURN {post_projection('post')} AS post
        LIMIT 1
        """

        rows = self.client.read(cypher, {"question": qid})
        return first_or_none(rows, "post")

    def get_parent_post(self, entity_id: str) -> Optional[Dict[str, Any]]:
        """Return the post an answer or comment belongs to.

        Answers reach their question through ``PARENT``, comments reach
        their post through ``ON_POST``. A top-level question has neither,
        in which case None is returned.
        """
        eid = self._require(entity_id, "entity_id")

        cypher = f"""
        MATCH (e) WHERE elementId(e) = $entity
        OPTIONAL MATCH (e)-[:PARENT|ON_POST]->(post:Post)
        RETURN {post_projection('post')} AS post
        LIMIT 1
        """

        rows = self.client.read(cypher, {"entity": eid})
        return first_or_none(rows, "post")

    def get_user_posts(self, user_id: str) -> List[Dict[str, Any]]:
        """List all posts (questions and answers) written by a user."""
        uid = self._require(user_id, "user_id")

        cypher = f"""
        MATCH (u:User) WHERE elementId(u) = $user
        MATCH (post:Post)-[:POSTED_BY]->(u)
        RETURN {post_projection('post')} AS post
        """

        rows = self.client.read(cypher, {"user": uid})
        return column(rows, "post")
