"""Pydantic models for WordGuard payloads and configuration."""
