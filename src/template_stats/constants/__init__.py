"""Constant values shared across template-stats modules."""
