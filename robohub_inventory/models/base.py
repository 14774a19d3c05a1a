"""
Base model configuration for SQLAlchemy ORM.

This module defines the declarative base that every inventory table
inherits from. The schema guard creates and synchronizes tables from
``Base.metadata``.

Usage:
    from robohub_inventory.models.base import Base

    class MyModel(Base):
        __tablename__ = "my_table"

        id = Column(UUIDType, primary_key=True)
        name = Column(String, unique=True, nullable=False)
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
