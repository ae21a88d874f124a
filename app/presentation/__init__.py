"""
Presentation layer: the entry points into the system.
HTTP routes live in `http`, per-operation handlers in `usecases`.
"""
