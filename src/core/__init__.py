"""Core: configuration, domain, contracts and services.

Nothing here imports the CLI or the HTTP adapters.
"""
