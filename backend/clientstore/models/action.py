"""
Filter action model.

Actions are owned by the filter subsystem. Only `enabled` and `client_id`
are written here, when the referenced download client is deleted.
"""
from sqlalchemy import Column, Integer, String, Boolean, Text
from clientstore.database import Base


class Action(Base):
    """Action dispatched to a download client when its filter matches."""

    __tablename__ = "action"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)

    filter_id = Column(Integer, nullable=False, index=True)
    # No foreign key: 0 means "no client"
    client_id = Column(Integer, nullable=False, default=0, index=True)

    category = Column(String(255), nullable=True)
    tags = Column(Text, nullable=True)
    save_path = Column(Text, nullable=True)
    paused = Column(Boolean, nullable=False, default=False)
