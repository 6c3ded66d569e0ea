"""Shared application constants.

Centralizes values used by the goal registry and the progress endpoints so
we can document and adjust them in one place.
"""

# Icon given to goals created without one
DEFAULT_ICON = "🎯"

# Number of weeks returned by the history endpoint when none is requested
DEFAULT_HISTORY_WEEKS = 10

# Accepted range for the `weeks` query parameter (one year max)
MIN_HISTORY_WEEKS = 1
MAX_HISTORY_WEEKS = 52
