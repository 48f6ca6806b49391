"""Data models for a generator run.

``GenerationConfig`` is built once from the user's answers and threaded
through the scaffolder unchanged.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Stack(str, Enum):
    """Frontend/backend technology combination to scaffold."""
    REACT_VITE_EXPRESS = "React Vite + Express"
    NEXTJS = "Next.js"


# ---------------------------------------------------------------------------
# GenerationConfig
# ---------------------------------------------------------------------------

class GenerationConfig(BaseModel):
    """The two interactive answers: which stack, and whether a database is needed."""

    model_config = ConfigDict(frozen=True)

    stack: Stack = Field(default=Stack.REACT_VITE_EXPRESS)
    needs_database: bool = Field(default=False)
