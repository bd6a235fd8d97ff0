"""
Utility functions module.

Parsing helpers for the textual amounts, dates and times carried on
receipts. Every helper returns None on unusable input rather than raising.
"""
