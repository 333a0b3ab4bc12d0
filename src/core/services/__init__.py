"""Application services: the todo operations, independent of the CLI."""
