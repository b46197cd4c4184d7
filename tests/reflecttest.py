"""Sample classes shared by the reflectkit tests."""

import typing
from dataclasses import dataclass


class Base:
    name: str
    __token: str
    level: int = 0

    counter = 5
    _protected_base = "p"
    __hidden = "base-secret"

    def __init__(self, name: str):
        self.name = name
        self.__token = f"tok-{name}"

    def greet(self, other: str) -> str:
        return f"{self.name} greets {other}"

    def _touch(self):
        return "touched"

    @staticmethod
    def add(a: int, b: int) -> int:
        return a + b

    @classmethod
    def make(cls, name: str):
        return cls(name)


class Account(Base):
    owner: str
    __balance: int
    RATE: typing.ClassVar[float] = 0.05

    __registry = ("main",)

    def __init__(self, owner: str, balance: int = 0):
        super().__init__(owner)
        self.owner = owner
        self.__balance = balance

    def deposit(self, amount: int) -> int:
        self.__balance += amount
        return self.__balance

    def total(self, *amounts):
        return sum(amounts)

    def explode(self):
        raise RuntimeError("boom")

    def __audit(self) -> str:
        return f"{self.owner}:{self.__balance}"

    @staticmethod
    def __fee(amount: int) -> int:
        return amount // 10


class Child(Base):
    """Inherits its constructor from Base."""


class Plain:
    pass


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    @property
    def norm(self):
        return abs(self.x) + abs(self.y)


class Fragile:
    def __init__(self, ok: bool):
        if not ok:
            raise ValueError("not ok")


class Echo:
    def __init__(self, value):
        self.value = value

    def say(self, text):
        return f"{self.value}:{text}"


class Scale:
    @staticmethod
    def twice(x: float) -> float:
        return x * 2


@dataclass
class Pair:
    left: int
    right: int


def account(owner="ann", balance=10):
    return Account(owner, balance)
