"""Dependency Inversion Principle: a high-level service welded to a concrete database."""


class MySQLDatabase:
    def save(self, data):
        return f"Saved {data} to MySQL"


class UserService:
    def __init__(self):
        self.database = MySQLDatabase()

    def create_user(self, name):
        return self.database.save(name)
