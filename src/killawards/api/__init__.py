"""HTTP intake for death and world-reset events."""
