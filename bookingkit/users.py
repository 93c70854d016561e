"""Storing users through any database that implements a common interface."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Database(ABC):
    """Somewhere a user record can be saved."""

    @abstractmethod
    def save(self, data: str) -> str:
        """Save the data and return the command that was executed."""


class MySQLDatabase(Database):
    def save(self, data: str) -> str:
        return f"Executing SQL query: INSERT INTO users VALUES {{ {data} }}"


class MongoDBDatabase(Database):
    def save(self, data: str) -> str:
        return f"Executing MongoDB Function: db.users.insert {{{{name: {data}}}}}"


class UserService:
    """Stores users in whichever database it is given."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def store_user(self, user: str) -> str:
        """Save a user and return the database's report."""
        return self.database.save(user)


def main(argv: list[str] | None = None) -> int:
    """Store sample users in each database."""
    parser = argparse.ArgumentParser(description="User storage demo.")
    parser.parse_args(argv)
    print(UserService(MySQLDatabase()).store_user("Ashish"))
    print(UserService(MongoDBDatabase()).store_user("Punit"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())