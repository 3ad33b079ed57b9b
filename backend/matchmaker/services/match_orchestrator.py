"""
Match Generation Orchestrator - one set, one call

Composes the engine for a single set:
1. Filter the roster to players eligible for the set
2. Drop players pinned in manual matches
3. Perfect 16 shortcut (16 players, one gender, one grade, sets 1-5)
4. Form matches for the requested format
5. Balance team totals, then repair partnerships (always in this order)
6. Assign courts after the ones reserved for manual matches

Pure and stateless: inputs are never mutated and every degraded condition
comes back as a warning string rather than an exception.
"""

import logging
from typing import List, Sequence

from matchmaker.config import MAX_SET_NUMBER, MIN_PLAYERS_FOR_GENERATION, PLACEHOLDER_COURT
from matchmaker.models.match import ConfigValidation, Match, MatchFormat, MatchGenerationConfig, MatchGenerationResult
from matchmaker.services.competitiveness import optimize_competitiveness
from matchmaker.services.match_balancer import balance_all_matches
from matchmaker.services.match_builder import generate_mixed_format, generate_same_sex_format
from matchmaker.services.perfect16 import build_perfect16_matches, detect_perfect16_scenario
from matchmaker.utils.courts import can_player_play_on_court
from matchmaker.utils.grades import sort_players_by_strength
from matchmaker.utils.players import available_players_for_set

logger = logging.getLogger(__name__)

NOT_ENOUGH_PLAYERS_WARNING = "Not enough players to generate matches"
COURTS_REUSED_WARNING = "Generated {matches} matches but only {courts} courts available. Courts will be reused."
HARD_COURT_WARNING = "Court {court} is a hard court but {name} prefers no hard courts"


# ============================================================================
# Court Assignment
# ============================================================================


def assign_courts(matches: Sequence[Match], court_names: Sequence[str], reserved: int = 0) -> List[Match]:
    """
    Stamp courts onto generated matches.

    The first ``reserved`` courts belong to manual matches; the rest are
    handed out by position and reused cyclically. With no courts left every
    match gets the placeholder label.
    """
    available = list(court_names[reserved:])
    if not available:
        return [m.model_copy(update={"court": PLACEHOLDER_COURT}) for m in matches]
    return [m.model_copy(update={"court": available[i % len(available)]}) for i, m in enumerate(matches)]


def hard_court_warnings(matches: Sequence[Match]) -> List[str]:
    warnings = []
    for match in matches:
        if match.court is None:
            continue
        for player in match.players:
            if not can_player_play_on_court(player, match.court):
                warnings.append(HARD_COURT_WARNING.format(court=match.court, name=player.name))
    return warnings


# ============================================================================
# Main Entry Point
# ============================================================================


def generate_matches(config: MatchGenerationConfig) -> MatchGenerationResult:
    warnings: List[str] = []
    court_names = [c.name for c in config.courts]
    manual_matches = list(config.manual_matches)

    available = available_players_for_set(config.players, config.set_number)
    manual_ids = {pid for m in manual_matches for pid in m.player_ids}
    pool = [p for p in available if p.id not in manual_ids]

    if len(pool) < MIN_PLAYERS_FOR_GENERATION:
        logger.info(
            "Set %d: %d eligible players, skipping generation", config.set_number, len(pool)
        )
        return MatchGenerationResult(
            matches=manual_matches,
            sit_out_players=[],
            warnings=[NOT_ENOUGH_PLAYERS_WARNING],
        )

    if detect_perfect16_scenario(pool, bool(manual_matches)):
        perfect = build_perfect16_matches(sort_players_by_strength(pool), court_names, config.set_number)
        if perfect is not None:
            logger.info(f"Set {config.set_number}: using Perfect 16 schedule")
            warnings.extend(hard_court_warnings(perfect))
            return MatchGenerationResult(matches=perfect, sit_out_players=[], warnings=warnings)
        logger.debug("Set %d: Perfect 16 unavailable, falling back", config.set_number)

    if config.format == MatchFormat.MIXED:
        generated = generate_mixed_format(pool, config.set_number, rotate=config.rotate)
    else:
        generated = generate_same_sex_format(pool, config.set_number, rotate=config.rotate)

    logger.debug("Before balancing: %d matches", len(generated))
    generated = balance_all_matches(generated)
    generated = optimize_competitiveness(generated)
    logger.debug("After optimization: %d matches", len(generated))

    generated = assign_courts(generated, court_names, reserved=len(manual_matches))

    available_courts = max(0, len(court_names) - len(manual_matches))
    if len(generated) > available_courts:
        warnings.append(COURTS_REUSED_WARNING.format(matches=len(generated), courts=available_courts))
    warnings.extend(hard_court_warnings(generated))

    return MatchGenerationResult(
        matches=manual_matches + generated,
        sit_out_players=[],
        warnings=warnings,
    )


def validate_match_config(config: MatchGenerationConfig) -> ConfigValidation:
    """Advisory pre-flight check; generate_matches does not call it."""
    errors: List[str] = []

    if config.set_number < 1 or config.set_number > MAX_SET_NUMBER:
        errors.append(f"Set number must be between 1 and {MAX_SET_NUMBER}")
    if not config.courts:
        errors.append("At least one court must be selected")
    if not config.players:
        errors.append("At least one player must be registered")

    return ConfigValidation(valid=not errors, errors=errors)
