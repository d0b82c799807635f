"""
Business services for the Visit Rewards backend.
"""
