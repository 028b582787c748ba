"""
Module: engine.progression

Purpose:
    Progression Engine: the session state machine shared by every game.
    Tracks per-family completion, validates attempts, awards
    streak-scaled stars, unlocks achievements and advances tiers.

Key Functions:
    - create_engine(): Engine for a bundled game
    - stars_for_streak(): Stars earned at a given post-attempt streak

Key Classes:
    - ProgressionEngine: State transitions over SessionState

States:
    Idle (no family) -> FamilySelected -> ... -> TierCompleted.
    The session is terminal once the last tier is complete.

Algorithm (attempt):
    1. No family selected, or key invalid -> WRONG_KEY / NO_FAMILY,
       streak resets to 0, nothing recorded
    2. Valid key whose word is already built -> DUPLICATE, state
       unchanged (streak kept)
    3. Otherwise -> SUCCESS: streak + 1, stars from the new streak, word
       appended to the family's progress, stars added to the score,
       achievements merged, tier completion checked

Dependencies:
    - engine.catalog: ContentCatalog
    - engine.choices, engine.validator, engine.achievements, engine.tiers

Used By:
    - feedback.speech: attempt_spoken
    - scripts/simulate_session.py

Design Notes:
    Every operation takes a SessionState and returns a new one; nothing
    is mutated in place. The engine is synchronous and single-threaded:
    one attempt is fully processed before the next is accepted, and a
    SessionState must not be shared between sessions. Randomness and
    time are injected.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Callable, List, Optional

from literacy_toolkit.common.thresholds import REWARD_THRESHOLDS
from literacy_toolkit.core.models import (
    AttemptOutcome,
    AttemptResult,
    BuiltRecord,
    Family,
    FamilyProgress,
    ProgressSummary,
    SessionState,
    Tier,
    normalise_key,
)

from .achievements import default_achievements, unlock_achievements
from .catalog import ContentCatalog, load_catalog
from .choices import generate_choices
from .config import EngineConfig
from .tiers import initialize_tier_progress, is_tier_complete
from .validator import resolve_item

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def stars_for_streak(streak: int) -> int:
    """
    Stars for a successful attempt at the given (post-increment) streak.

    Example:
        >>> [stars_for_streak(s) for s in range(1, 7)]
        [1, 1, 2, 2, 3, 3]
    """
    if streak >= REWARD_THRESHOLDS.three_star_streak:
        return 3
    if streak >= REWARD_THRESHOLDS.two_star_streak:
        return 2
    return REWARD_THRESHOLDS.base_stars


def create_engine(
    game_code: Optional[str] = None,
    *,
    seed: Optional[int] = None,
    choice_count: Optional[int] = None,
    start_tier: Tier = Tier.EASY,
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> ProgressionEngine:
    """
    Build an engine for a bundled game.

    Args:
        game_code: Bundled game; None selects the default game
        seed: Seed for the engine's random source (ignored when rng given)
        choice_count: Override for every tier's choice count
        start_tier: Tier new sessions start in
        rng: Random source to use instead of a seeded one
        clock: Time source returning aware datetimes

    Raises:
        UnsupportedGameError: If game_code is not registered

    Example:
        >>> engine = create_engine("word_builder", seed=1)
        >>> state = engine.create_initial_state()
    """
    config = EngineConfig(
        game_code=game_code,
        seed=seed,
        choice_count=choice_count,
        start_tier=start_tier,
    )
    return ProgressionEngine(
        catalog=load_catalog(game_code),
        config=config,
        rng=rng,
        clock=clock or _utc_now,
    )


@dataclass
class ProgressionEngine:
    """
    Content-family progression state machine.

    The engine itself holds no session data, only the catalog and the
    random/time sources; all session data lives in SessionState.

    Attributes:
        catalog: Game catalog (shared, read-only)
        config: Engine configuration
        rng: Random source for family picks and choice shuffles
        clock: Time source for history and achievement timestamps
    """

    catalog: ContentCatalog
    config: EngineConfig = field(default_factory=EngineConfig)
    rng: Optional[random.Random] = None
    clock: Callable[[], datetime] = _utc_now

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    # ─────────────────────────────────────────────────────────────────────────
    # Session Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def create_initial_state(self) -> SessionState:
        """Fresh session: start tier, no family, all achievements locked."""
        return SessionState(
            current_tier=self.config.start_tier,
            achievements=default_achievements(),
        )

    def initialize_tier_progress(self, state: SessionState, tier: Tier | int) -> SessionState:
        return initialize_tier_progress(state, self.catalog, tier)

    def select_family(self, state: SessionState, key: str) -> SessionState:
        """
        Make the family with ``key`` current.

        An unknown key leaves the state unchanged.
        """
        family = self.catalog.family_by_key(key)
        if family is None:
            logger.debug("select_family: unknown family %r ignored", key)
            return state
        return replace(state, current_family=family)

    def select_random_family(self, state: SessionState) -> SessionState:
        """
        Pick a random incomplete family of the current tier.

        When every family of the tier is complete, pick among all of them
        so a mastered tier can still be replayed.
        """
        families = self.catalog.families_by_tier(state.current_tier)
        if not families:
            return state
        incomplete = [f for f in families if not state.is_family_completed(f.key)]
        family = self.rng.choice(incomplete or families)
        return replace(state, current_family=family)

    # ─────────────────────────────────────────────────────────────────────────
    # Attempts
    # ─────────────────────────────────────────────────────────────────────────

    def attempt(self, state: SessionState, key: str) -> tuple[SessionState, AttemptResult]:
        """
        Process one learner attempt against the current family.

        Never raises for learner input; every outcome is reported in the
        returned AttemptResult.

        Args:
            state: Current session state
            key: Key the learner chose (any case)

        Returns:
            Tuple of (new state, result)
        """
        normalised = normalise_key(key) if isinstance(key, str) else ""
        family = state.current_family

        if family is None:
            return self._failure(state, AttemptOutcome.NO_FAMILY, normalised)

        item = resolve_item(normalised, family)
        if item is None:
            return self._failure(state, AttemptOutcome.WRONG_KEY, normalised)

        progress = state.progress_for(family.key) or FamilyProgress.fresh(family)
        if progress.has_built(item.word):
            logger.debug("Duplicate %r in %s (streak kept at %d)", item.word, family.key, state.streak)
            return state, AttemptResult(
                outcome=AttemptOutcome.DUPLICATE,
                key=normalised,
                item=item,
                streak=state.streak,
            )

        now = self.clock()
        streak = state.streak + 1
        stars = stars_for_streak(streak)
        progress = progress.with_item(item.word)
        record = BuiltRecord(
            item_word=item.word,
            family_key=family.key,
            answer_key=item.answer_key,
            display_symbol=item.display_symbol,
            timestamp=now,
            stars_awarded=stars,
        )

        new_state = replace(
            state,
            family_progress={**state.family_progress, family.key: progress},
            streak=streak,
            total_score=state.total_score + stars,
            history=state.history + (record,),
        )
        new_state, unlocked = unlock_achievements(new_state, self.catalog, now)
        tier_completed = is_tier_complete(new_state, self.catalog, new_state.current_tier)

        logger.debug(
            "Built %r in %s: %d star(s), streak %d, family %d/%d",
            item.word, family.key, stars, streak,
            len(progress.built_items), progress.total_items,
        )
        if tier_completed:
            logger.info("Tier %d complete", new_state.current_tier)

        return new_state, AttemptResult(
            outcome=AttemptOutcome.SUCCESS,
            key=normalised,
            item=item,
            stars=stars,
            streak=streak,
            family_completed=progress.completed,
            tier_completed=tier_completed,
            new_achievements=unlocked,
        )

    def _failure(
        self,
        state: SessionState,
        outcome: AttemptOutcome,
        key: str,
    ) -> tuple[SessionState, AttemptResult]:
        logger.debug("Attempt %r failed: %s (streak reset from %d)", key, outcome.value, state.streak)
        new_state = replace(state, streak=0) if state.streak else state
        return new_state, AttemptResult(outcome=outcome, key=key, streak=0)

    # ─────────────────────────────────────────────────────────────────────────
    # Tier Advancement
    # ─────────────────────────────────────────────────────────────────────────

    def can_advance(self, state: SessionState) -> bool:
        return (
            not state.current_tier.is_last
            and is_tier_complete(state, self.catalog, state.current_tier)
        )

    def advance_tier(self, state: SessionState) -> SessionState:
        """
        Move to the next tier and pick a family in it.

        At the last tier the state is returned unchanged. Progress for the
        new tier's families is created only where none exists yet.
        """
        next_tier = state.current_tier.next()
        if next_tier is None:
            logger.debug("advance_tier: already at last tier %d", state.current_tier)
            return state

        new_state = replace(state, current_tier=next_tier, current_family=None)
        new_state = initialize_tier_progress(new_state, self.catalog, next_tier)
        new_state = self.select_random_family(new_state)
        logger.info(
            "Advanced to tier %d (%s)",
            next_tier, self.catalog.tier_info(next_tier).name,
        )
        return new_state

    # ─────────────────────────────────────────────────────────────────────────
    # Read-only Projections
    # ─────────────────────────────────────────────────────────────────────────

    def choice_count_for(self, tier: Tier | int) -> int:
        if self.config.choice_count is not None:
            return self.config.choice_count
        return self.catalog.tier_info(tier).choice_count

    def generate_choices(
        self,
        state: SessionState,
        family: Optional[Family] = None,
        total_count: Optional[int] = None,
    ) -> List[str]:
        """
        Candidate keys for a family (default: the current family).

        ``total_count`` defaults to the configured or tier choice count.
        Returns [] when there is no family.
        """
        family = family or state.current_family
        if family is None:
            return []
        if total_count is None:
            total_count = self.choice_count_for(family.tier)
        return generate_choices(
            state,
            family,
            total_count,
            key_universe=self.catalog.key_universe,
            rng=self.rng,
        )

    def progress_summary(self, state: SessionState) -> ProgressSummary:
        families = self.catalog.families_by_tier(state.current_tier)
        words_built = 0
        for family in families:
            progress = state.progress_for(family.key)
            if progress:
                words_built += len(progress.built_items)

        return ProgressSummary(
            tier=state.current_tier,
            tier_name=self.catalog.tier_info(state.current_tier).name,
            families_completed=sum(1 for f in families if state.is_family_completed(f.key)),
            total_families=len(families),
            words_built=words_built,
            total_words=self.catalog.tier_item_count(state.current_tier),
            total_stars=state.total_score,
            achievements_unlocked=len(state.unlocked_ids),
            total_achievements=len(state.achievements),
        )
