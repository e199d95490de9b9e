"""Application layer: CLI commands and their dispatch."""
