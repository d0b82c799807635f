"""
Utility helpers for the Visit Rewards backend.
"""
