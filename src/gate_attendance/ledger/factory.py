from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import ReentryStrategy
from .strategies.reopen_strategy import ReopenStrategy
from .strategies.single_visit_strategy import SingleVisitStrategy


@dataclass
class ReentryStrategyFactory:
    """Factory Pattern: pick the re-entry rule from configuration."""

    allow_reentry: bool = True

    def create(self) -> ReentryStrategy:
        if self.allow_reentry:
            return ReopenStrategy()
        return SingleVisitStrategy()
