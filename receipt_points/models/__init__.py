"""
Result models for the receipt scoring system.
"""
