"""Command-line interface for WordGuard."""
