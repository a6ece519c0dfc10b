"""
exprlex Command-Line Interface
==============================

This package provides the ``exprlex`` command-line tool, which reads a
source file and prints its token stream. It is implemented as a
Click-based CLI application.
"""

__all__ = ["exprlex"]
