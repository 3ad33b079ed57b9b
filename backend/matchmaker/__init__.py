"""Doubles match generation for multi-set social tennis sessions."""

from matchmaker.services.match_orchestrator import generate_matches, validate_match_config

__all__ = ["generate_matches", "validate_match_config"]
