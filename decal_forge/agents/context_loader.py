"""
Context Loader Utility for Decal Forge Agents

This module provides loading of context files for AI agents.
Context files contain system prompts with hardening against
prompt injection.
"""

from pathlib import Path
from functools import lru_cache


# Base directory for agents
AGENTS_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=10)
def load_context(agent_name: str) -> str:
    """
    Load context file for a specific agent.

    Args:
        agent_name: Name of the agent (curator, moderator, writer)

    Returns:
        Content of the context file as string

    Raises:
        ValueError: If the agent is unknown
        FileNotFoundError: If context file doesn't exist
    """
    context_paths = {
        "curator": AGENTS_DIR / "curator" / "context_curator.txt",
        "moderator": AGENTS_DIR / "painter" / "context_moderator.txt",
        "writer": AGENTS_DIR / "narrative" / "context_writer.txt",
    }

    if agent_name not in context_paths:
        raise ValueError(f"Unknown agent: {agent_name}. Available: {list(context_paths.keys())}")

    context_path = context_paths[agent_name]

    if not context_path.exists():
        raise FileNotFoundError(f"Context file not found: {context_path}")

    return context_path.read_text(encoding="utf-8")


def wrap_user_input(user_input: str) -> str:
    """
    Wrap user input in XML tags for input isolation.
    This helps the AI distinguish between instructions and user data.
    """
    # Escape any existing XML-like tags in user input to prevent injection
    sanitized = user_input.replace("<", "&lt;").replace(">", "&gt;")
    return f"<user_input>\n{sanitized}\n</user_input>"


# User-friendly error messages (not exposing internal details)
ERROR_MESSAGES = {
    "CONTENT_REJECTED": "This idea can't be turned into a decal. Please try a different idea.",
    "IMAGE_FAILED": (
        "The AI failed to generate an image. This can happen with unusual prompts "
        "or if the content violates safety policies. Please try again with a different idea."
    ),
    "TITLE_FAILED": "The AI failed to generate a title for this prompt. Please try again.",
    "STORY_FAILED": "The AI failed to generate a story or narration. Please try again.",
    "NOT_CONFIGURED": "The decal generator is not available right now.",
    "GENERATION_ERROR": "Something went wrong while creating your decal. Please try again.",
}


def get_user_friendly_error(error_type: str) -> str:
    """
    Get user-friendly error message without exposing internal details.

    Args:
        error_type: Internal error type identifier

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(error_type, ERROR_MESSAGES["GENERATION_ERROR"])
