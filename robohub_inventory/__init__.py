"""
RoboHub inventory persistence layer.

Typed storage, schema evolution and seed loading for the repositories,
packages, scenarios, datasets and simulators of the RoboHub catalog.
"""

__version__ = "0.1.0"
