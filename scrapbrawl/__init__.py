"""Package initializer for the scrapbrawl duel game."""

from __future__ import annotations

from .config import settings as settings  # Re-export for compatibility.

__all__ = ["settings"]
