"""
log.py.

Does: Lightweight topic logger controlled by CSSVARS_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the orchestrator and CLI demo.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_topics"]

_ENV_VAR = "CSSVARS_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable CSSVARS_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Turn topics on for this process (sets the env var, then reloads)."""
    current = _load_topics() | {t.strip().lower() for t in topics if t.strip()}
    os.environ[_ENV_VAR] = ",".join(sorted(current))
    reload_topics()


def debug(
    msg: str,
    topic: str = "import",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via CSSVARS_DEBUG_TOPICS.
    """
    if not _DEBUG_TOPICS:
        return
    if stream is None:
        stream = sys.stderr
    topic_key = topic.lower().strip()
    if "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
