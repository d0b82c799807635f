"""
HTTP API blueprints for the Visit Rewards mobile client.
"""
