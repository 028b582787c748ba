#!/usr/bin/env python3
"""Play a seeded session through the progression engine.

A simulated learner picks from the generated choices each turn and
answers correctly with the given accuracy. Useful for eyeballing star
pacing, achievement unlocks and tier advancement for a game.

Usage:
    python scripts/simulate_session.py [--game CODE] [--seed N]
                                       [--turns N] [--accuracy 0.8]
"""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from literacy_toolkit.engine import create_engine, is_valid
from literacy_toolkit.feedback import announce, celebration_message
from literacy_toolkit.plugins import get_game_plugin

logger = logging.getLogger("simulate")


class PrintSpeaker:
    def speak(self, text: str) -> None:
        print(f"    🔊 {text}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Simulate a learner session")
    parser.add_argument("--game", default=None, help="Game code (default: default game)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--turns", type=int, default=60, help="Maximum attempts")
    parser.add_argument("--accuracy", type=float, default=0.8, help="Chance of a correct pick")
    parser.add_argument("--quiet", action="store_true", help="Skip spoken phrases")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    plugin = get_game_plugin(args.game)
    engine = create_engine(plugin.code, seed=args.seed)
    learner = random.Random(args.seed + 1)
    speaker = PrintSpeaker()

    state = engine.create_initial_state()
    state = engine.initialize_tier_progress(state, state.current_tier)
    state = engine.select_random_family(state)
    print(f"{plugin.name} ({plugin.code}), seed {args.seed}")

    for turn in range(1, args.turns + 1):
        family = state.current_family
        choices = engine.generate_choices(state)
        valid = [k for k in choices if is_valid(k, family)]
        wrong = [k for k in choices if k not in valid]
        if valid and (not wrong or learner.random() < args.accuracy):
            key = learner.choice(valid)
        else:
            key = learner.choice(wrong)

        state, result = engine.attempt(state, key)
        banner = celebration_message(result, plugin.kind, learner)
        print(
            f"{turn:3d}. [{family.key}] {choices} -> {key!r}: "
            f"{result.outcome.value} {banner.emoji} {banner.text} "
            f"(stars {result.stars}, streak {result.streak}, score {state.total_score})"
        )
        if not args.quiet:
            announce(
                result,
                speaker,
                kind=plugin.kind,
                family_key=family.key,
                tier_name=engine.catalog.tier_info(state.current_tier).name,
                rng=learner,
            )
        for achievement in result.new_achievements:
            print(f"    {achievement.emoji} Achievement unlocked: {achievement.name}")

        if result.tier_completed:
            if state.current_tier.is_last:
                print("All tiers complete!")
                break
            state = engine.advance_tier(state)
        elif result.family_completed:
            state = engine.select_random_family(state)

    summary = engine.progress_summary(state)
    print(
        f"\nTier {summary.tier} ({summary.tier_name}): "
        f"{summary.families_completed}/{summary.total_families} families, "
        f"{summary.words_built}/{summary.total_words} words ({summary.percent_complete}%), "
        f"{summary.total_stars} stars, "
        f"{summary.achievements_unlocked}/{summary.total_achievements} achievements"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
