"""
pkgfilter — decide which catalog components still need installing.
"""

__version__ = "0.1.0"
