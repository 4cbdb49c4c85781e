"""Liskov Substitution Principle: a subtype that breaks its parent's contract."""


class Bird:
    def fly(self):
        return "Flying"


class Penguin(Bird):
    def fly(self):
        raise NotImplementedError("Penguins cannot fly")
