"""
Dependency Age Tool

A tool for measuring the average age of the dependencies used by a Maven build.
"""

__version__ = "0.1.0"
__author__ = "Imranur Rahman"

from .cli import main

__all__ = ["main"]
