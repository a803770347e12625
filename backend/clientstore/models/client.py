"""
Download client model.
"""
from sqlalchemy import Column, Integer, String, Boolean, Text
from clientstore.database import Base


class Client(Base):
    """Download client configuration row."""

    __tablename__ = "client"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # qbittorrent, deluge_v2, sabnzbd, ...
    enabled = Column(Boolean, nullable=False, default=False)

    # Connection
    host = Column(String(255), nullable=False)
    port = Column(Integer, nullable=False, default=0)
    tls = Column(Boolean, nullable=False, default=False)
    tls_skip_verify = Column(Boolean, nullable=False, default=False)
    username = Column(String(255), nullable=False, default="")
    password = Column(String(255), nullable=False, default="")

    # JSON blob: {"apikey": ..., "basic": {...}, "rules": {...}}
    settings = Column(Text, nullable=False, default="")
