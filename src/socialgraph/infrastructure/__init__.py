"""Infrastructure layer — graph storage and file access.

May import from domain. Must never import from services, commands, or output.
"""
