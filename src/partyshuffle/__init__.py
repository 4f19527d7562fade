"""Balanced, rotation-aware party assignment for ranked rosters."""
