"""
Rox Command-Line Interface
==========================

This package provides the ``rox`` command-line tool, a Click-based
application that scans a script file or runs an interactive prompt.
"""

__all__ = ["rox"]
