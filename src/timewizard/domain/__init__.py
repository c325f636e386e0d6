"""Domain layer — datetime grammar, week arithmetic, relative phrases.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
