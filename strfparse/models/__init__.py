"""Data models for strfparse output."""
