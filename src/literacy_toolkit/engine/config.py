"""
Module: engine.config

Purpose:
    Configuration dataclass for a progression session. Immutable
    configuration with validation on construction.

Key Classes:
    - EngineConfig: Game, randomness and choice settings

Dependencies:
    - dataclasses (std)

Used By:
    - engine.progression: ProgressionEngine, create_engine
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from literacy_toolkit.core.models import Tier


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for a progression engine (immutable).

    Attributes:
        game_code: Bundled game to load ("word_builder", "rhyme", "phonics");
            None selects the default game
        seed: Random seed for reproducible choices and family picks;
            None draws a fresh seed per engine
        choice_count: Overrides the tier's choice count when set
        start_tier: Tier a new session starts in

    Invariants:
        - choice_count is None or choice_count >= 1
        - start_tier is a valid Tier

    Example:
        >>> config = EngineConfig(game_code="rhyme", seed=7)
        >>> config.start_tier
        <Tier.EASY: 1>
    """

    game_code: Optional[str] = None
    seed: Optional[int] = None
    choice_count: Optional[int] = None
    start_tier: Tier = Tier.EASY

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.choice_count is not None and self.choice_count < 1:
            raise ValueError(f"choice_count must be positive: {self.choice_count}")
        try:
            object.__setattr__(self, "start_tier", Tier(self.start_tier))
        except ValueError as exc:
            raise ValueError(f"start_tier must be 1-3: {self.start_tier!r}") from exc
