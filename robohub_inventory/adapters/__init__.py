"""
Adapters to external systems.
"""
