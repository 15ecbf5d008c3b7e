"""gitact: interactive GitHub activity dashboard for the terminal.

Fetches a user's public repositories and recent events, derives activity
statistics and a grade, and browses them through list, table, statistics
and activity views.
"""

__version__ = "1.0.0"
