"""Domain models and errors.

Pure data structures (Pydantic v2); the domain does not know about HTTP,
the CLI, or the store client.
"""
