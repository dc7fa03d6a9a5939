"""Core logic for eureka, independent of the CLI."""
