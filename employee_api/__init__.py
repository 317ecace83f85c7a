"""
Top-level package for the Employee API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
