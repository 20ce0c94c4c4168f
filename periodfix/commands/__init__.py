"""CLI command implementations for periodfix."""
