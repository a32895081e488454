"""CLI commands for splitpane."""
