"""Utility helpers for splitpane."""
