"""Core date parsing pipeline."""
