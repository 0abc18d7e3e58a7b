"""Repositories encapsulating SQL for the catalog tables."""
