"""
Expense Tracker - Source Package

A small personal expense tracker for the command line.

DESIGN PRINCIPLES:
1. Validate everything before touching storage
2. Fail early, fail visibly
3. No silent corrections
4. Every command is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
