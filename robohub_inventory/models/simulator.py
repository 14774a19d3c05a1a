from sqlalchemy import Column, JSON, String

from robohub_inventory.models.base import Base
from robohub_inventory.models.custom_types import UTCDateTime, UUIDType


class SimulatorModel(Base):
    """
    Table for simulation environments.

    The ``config`` column holds the simulator's configuration document as-is.
    """
    __tablename__ = "simulators"

    id = Column(UUIDType, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String)
    type = Column(String, nullable=False)
    version = Column(String)
    config = Column(JSON)
    tags = Column(JSON)

    created_at = Column(UTCDateTime, nullable=False, index=True)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<Simulator {self.name}>"
