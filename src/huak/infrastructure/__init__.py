"""Infrastructure layer — shell startup files and completion directories.

This layer depends on stdlib and click's shell-completion support.
It must never import from services, commands, or output.
"""
