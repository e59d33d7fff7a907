"""
models/user.py
--------------
Domain model for a row of the `users` table.
"""

from dataclasses import dataclass


@dataclass
class User:
    """
    Represents a single user.

    Attributes:
        name: Display name.
        email: Email address, unique across all users (enforced by the database).
        id: Database primary key (0 for records not read back from the database).
    """
    name: str
    email: str
    id: int = 0

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"
