"""Bloglist Application Package: blog posts, users and token auth over FastAPI.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
