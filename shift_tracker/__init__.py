"""
Shift Tracker - Source Package

A personal work-hours and pay tracker. Records work shifts, keeps them
in a plain text file, and reports on them.

DESIGN PRINCIPLES:
1. Pay is derived, never stored
2. Fail early, fail visibly
3. No silent corrections
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Shift Tracker Team"
