"""Interface Segregation Principle: narrow interfaces, implemented only where they apply."""
from abc import ABC, abstractmethod


class Workable(ABC):
    @abstractmethod
    def work(self):
        ...


class Eatable(ABC):
    @abstractmethod
    def eat(self):
        ...


class HumanWorker(Workable, Eatable):
    def work(self):
        return "Working"

    def eat(self):
        return "Eating lunch"


class RobotWorker(Workable):
    def work(self):
        return "Working"
