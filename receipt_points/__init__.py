"""
Receipt Points - Receipt Scoring Engine

Accepts purchase receipts, scores them against a fixed set of reward
rules, and keeps the awarded points under a generated receipt identifier
for later retrieval.
"""

__version__ = "0.1.0"
__author__ = "Receipt Points Team"
