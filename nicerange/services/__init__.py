"""Service layer for nicerange."""
