"""Dependency Inversion Principle: the service depends on an abstraction it is given."""
from abc import ABC, abstractmethod


class Database(ABC):
    @abstractmethod
    def save(self, data):
        ...


class MySQLDatabase(Database):
    def save(self, data):
        return f"Saved {data} to MySQL"


class UserService:
    def __init__(self, database: Database):
        self.database = database

    def create_user(self, name):
        return self.database.save(name)
