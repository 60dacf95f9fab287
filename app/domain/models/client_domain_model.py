# app/domain/models/client_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Client:
    """Domain model for a customer who may schedule services."""
    id: UUID
    name: str
    email: str  # Normalized (trimmed, lower-case)
    password: str  # Hashed password
    phone: str
    age: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
