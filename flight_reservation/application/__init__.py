"""Application layer - orchestration of domain operations."""
