"""Liskov Substitution Principle: only birds that can fly promise to fly."""


class Bird:
    def eat(self):
        return "Eating"


class FlyingBird(Bird):
    def fly(self):
        return "Flying"


class Sparrow(FlyingBird):
    pass


class Penguin(Bird):
    def swim(self):
        return "Swimming"
