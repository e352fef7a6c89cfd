"""WordGuard CLI commands."""
