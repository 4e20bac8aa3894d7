"""
Client-side quote and transaction-building engine for a constant-product AMM
"""

__version__ = "0.1.0"
