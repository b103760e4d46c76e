"""Domain layer — specifiers, option records, and tagged variants.

This layer depends only on stdlib, pydantic, and packaging.
It must never import from services, infrastructure, commands, or config.
"""
