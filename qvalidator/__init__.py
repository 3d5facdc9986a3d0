"""
qvalidator - question validation engine for 20 Questions style games.

Decides whether a proposed yes/no question repeats an earlier one, leaks
outside the active category, or is too vague to answer.
"""

__version__ = "0.1.0"
