#!/usr/bin/env python3
"""Validate every bundled game catalog and print a summary.

Loads each game through the registry (manifest + strict schema check)
and builds its ContentCatalog, which runs the structural checks.

Usage:
    python scripts/validate_catalogs.py [--game CODE] [-v]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from literacy_toolkit.core.models import Tier
from literacy_toolkit.core.schemas import ValidationError
from literacy_toolkit.engine import CatalogError, load_catalog
from literacy_toolkit.plugins import (
    MissingResourcesError,
    get_initialization_error,
    supported_game_codes,
)

logger = logging.getLogger("validate_catalogs")


def summarize(code: str) -> bool:
    try:
        catalog = load_catalog(code)
    except (ValidationError, CatalogError, MissingResourcesError) as e:
        logger.error("%s: FAILED - %s", code, e)
        return False

    logger.info("%s: OK (%d families, %d keys)", code, len(catalog.families), len(catalog.key_universe))
    for tier in Tier:
        info = catalog.tier_info(tier)
        families = catalog.families_by_tier(tier)
        logger.info(
            "  Tier %d %-7s %2d families, %3d words, %d choices",
            tier, info.name, len(families), catalog.tier_item_count(tier), info.choice_count,
        )
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate bundled game catalogs")
    parser.add_argument("--game", help="Only validate this game code")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    init_error = get_initialization_error()
    if init_error:
        logger.warning(init_error)

    codes = [args.game] if args.game else supported_game_codes()
    if not codes:
        logger.error("No games found")
        return 1

    results = [summarize(code) for code in codes]
    failed = results.count(False)
    print(f"\n{len(results) - failed}/{len(results)} catalogs valid")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
