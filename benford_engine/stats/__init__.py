"""Goodness-of-fit statistics for first-digit distributions."""
