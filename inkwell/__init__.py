"""Inkwell Application Package — blog posts and categories over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
