"""Simple CLI for querying the Stack Overflow for Teams graph offline.

Usage examples (from project root):

    sochat find-relevant-questions "docker build fails with permission denied"

    sochat retrieve-thread "4:2f1c...:17" --sort

    sochat answer "How do I get access to the staging database?"

The CLI uses:
- .env configuration (NEO4J_URI, NEO4J_USERNAME, NEO4J_PASSWORD, OPENAI_API_KEY)
- Neo4jClient for connection
- GraphTools for lookups, so output matches what the LLM sees
- SOChatAgent for the `answer` command
"""

import argparse
import json
import logging
from typing import Any, Callable

from .agent import SOChatAgent
from .config import Config
from .neo4j import CommentDB, Neo4jClient, PostDB, UserDB
from .tools import GraphTools


def _print_json(value: Any) -> None:
    # Anything the projections did not already stringify is rendered with str().
    print(json.dumps(value, indent=2, sort_keys=True, default=str))


def _run_tool(args: argparse.Namespace, call: Callable[[GraphTools], Any]) -> None:
    """Open a client, run one graph tool and print its result as JSON."""

    config = Config()
    client = Neo4jClient(config=config)

    with client:
        tools = GraphTools(PostDB(client), CommentDB(client), UserDB(client))
        result = call(tools)

    if isinstance(result, list):
        _print_json({"count": len(result), "results": result})
    else:
        _print_json(result)


def _cmd_find_relevant_questions(args: argparse.Namespace) -> None:
    """Find candidate questions by vector search on the question text."""
    _run_tool(args, lambda tools: tools.find_relevant_questions(args.question))


def _cmd_retrieve_thread(args: argparse.Namespace) -> None:
    """Print all posts of a thread, optionally ordered by creation time."""

    def call(tools: GraphTools) -> Any:
        posts = tools.retrieve_thread(args.question_id)
        if args.sort:
            posts = sorted(posts, key=lambda post: post.get("created") or "")
        return posts

    _run_tool(args, call)


def _cmd_retrieve_accepted_answer(args: argparse.Namespace) -> None:
    _run_tool(args, lambda tools: tools.retrieve_accepted_answer(args.question_id))


def _cmd_retrieve_comments(args: argparse.Namespace) -> None:
    _run_tool(args, lambda tools: tools.retrieve_comments(args.post_id))


def _cmd_get_user(args: argparse.Namespace) -> None:
    _run_tool(args, lambda tools: tools.get_user(args.entity_id))


def _cmd_get_user_posts(args: argparse.Namespace) -> None:
    _run_tool(args, lambda tools: tools.get_user_posts(args.user_id))


def _cmd_get_user_comments(args: argparse.Namespace) -> None:
    _run_tool(args, lambda tools: tools.get_user_comments(args.user_id))


def _cmd_get_parent_post(args: argparse.Namespace) -> None:
    _run_tool(args, lambda tools: tools.get_parent_post(args.entity_id))


def _cmd_answer(args: argparse.Namespace) -> None:
    """Answer a question end to end through the LLM and the graph tools."""

    config = Config()
    client = Neo4jClient(config=config)

    with client:
        agent = SOChatAgent.from_config(config, client)
        reply = agent.answer(args.question)

    print(reply)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CLI for the Stack Overflow for Teams graph chat agent",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override LOG_LEVEL (e.g. DEBUG, INFO, WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_relevant = subparsers.add_parser(
        "find-relevant-questions",
        help="Find candidate questions using vector search on the question text",
    )
    p_relevant.add_argument("question", type=str, help="The question exactly as asked")
    p_relevant.set_defaults(func=_cmd_find_relevant_questions)

    p_thread = subparsers.add_parser(
        "retrieve-thread",
        help="Return all posts in a thread (question + answers)",
    )
    p_thread.add_argument("question_id", type=str, help="Element id of the question")
    p_thread.add_argument(
        "--sort",
        action="store_true",
        help="Order posts by their 'created' timestamp",
    )
    p_thread.set_defaults(func=_cmd_retrieve_thread)

    p_accepted = subparsers.add_parser(
        "retrieve-accepted-answer",
        help="Return the accepted answer of a question, if any",
    )
    p_accepted.add_argument("question_id", type=str, help="Element id of the question")
    p_accepted.set_defaults(func=_cmd_retrieve_accepted_answer)

    p_comments = subparsers.add_parser(
        "retrieve-comments",
        help="Return all comments on a post (question or answer)",
    )
    p_comments.add_argument("post_id", type=str, help="Element id of the post")
    p_comments.set_defaults(func=_cmd_retrieve_comments)

    p_user = subparsers.add_parser(
        "get-user",
        help="Return the author of a post or comment",
    )
    p_user.add_argument("entity_id", type=str, help="Element id of the post or comment")
    p_user.set_defaults(func=_cmd_get_user)

    p_user_posts = subparsers.add_parser(
        "get-user-posts",
        help="List all posts written by a user",
    )
    p_user_posts.add_argument("user_id", type=str, help="Element id of the user")
    p_user_posts.set_defaults(func=_cmd_get_user_posts)

    p_user_comments = subparsers.add_parser(
        "get-user-comments",
        help="List all comments written by a user",
    )
    p_user_comments.add_argument("user_id", type=str, help="Element id of the user")
    p_user_comments.set_defaults(func=_cmd_get_user_comments)

    p_parent = subparsers.add_parser(
        "get-parent-post",
        help="Return the parent post of an answer or comment",
    )
    p_parent.add_argument("entity_id", type=str, help="Element id of the answer or comment")
    p_parent.set_defaults(func=_cmd_get_parent_post)

    p_answer = subparsers.add_parser(
        "answer",
        help="Answer a question with the LLM, using the graph tools for evidence",
    )
    p_answer.add_argument("question", type=str, help="The user's question")
    p_answer.set_defaults(func=_cmd_answer)

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        return

    level = args.log_level or Config().log_level
    logging.basicConfig(level=level.upper())

    args.func(args)


if __name__ == "__main__":
    main()
