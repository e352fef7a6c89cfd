"""Core library: word rules, input checks, error reports and logging."""
