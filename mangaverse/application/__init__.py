"""
Application layer.

Use-case orchestration over the database and catalog boundaries.
"""
