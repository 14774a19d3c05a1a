"""
Startup-time schema management: the schema-evolution guard and the seed loader.
"""

from robohub_inventory.database.schema_guard import MigrationReport, SchemaGuard, SchemaState
from robohub_inventory.database.seed import SeedSummary, load_seed_data

__all__ = ["MigrationReport", "SchemaGuard", "SchemaState", "SeedSummary", "load_seed_data"]
