"""Interface Segregation Principle: one fat interface forces unused methods."""
from abc import ABC, abstractmethod


class Worker(ABC):
    @abstractmethod
    def work(self):
        ...

    @abstractmethod
    def eat(self):
        ...


class HumanWorker(Worker):
    def work(self):
        return "Working"

    def eat(self):
        return "Eating lunch"


class RobotWorker(Worker):
    def work(self):
        return "Working"

    def eat(self):
        raise NotImplementedError("Robots do not eat")
