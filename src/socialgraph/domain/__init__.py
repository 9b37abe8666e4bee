"""Domain layer — edge-list parsing, person IDs, and load errors.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
