"""Configuration, logging, error types and in‑memory storage."""
