"""Schemas — Pydantic models for API boundaries."""
