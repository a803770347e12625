"""
Database models for Clientstore.
"""
from clientstore.models.client import Client
from clientstore.models.action import Action

__all__ = [
    "Client",
    "Action",
]
