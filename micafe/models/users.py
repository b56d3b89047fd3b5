# micafe/models/users.py
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    CLIENT = "client"
    STAFF = "staff"
    ADMIN = "admin"


# Represents a user account; the role is fixed at creation
@dataclass
class User:
    id: str
    email: str
    password: str  # stored as given, no hashing in this system
    name: str
    role: Role = Role.CLIENT
