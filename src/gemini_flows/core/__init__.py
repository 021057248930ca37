"""Core data types for gemini-flows."""
