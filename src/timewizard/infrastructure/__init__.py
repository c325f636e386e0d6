"""Infrastructure layer — HTML documents, clocks, and file I/O.

Depends on domain. Must never import from services, commands, or output.
"""
