import abc
import collections
import dataclasses
import enum

import pytest


class Base:
    kind = "base"

    def greet(self):
        return f"hi {self.name}"


class Derived(Base):
    kind = "derived"

    def __init__(self, name):
        self.name = name

    def describe(self):
        return f"{self.kind} {self.name}"


class Box:
    def __init__(self, width):
        self.width = width

    @property
    def area(self):
        return self.width**2


class Slotted:
    __slots__ = ("x", "y", "__hidden")

    def __init__(self, x):
        self.x = x
        self.__hidden = "secret"


@dataclasses.dataclass(frozen=True)
class Point:
    x: int
    y: int


Pair = collections.namedtuple("Pair", ["a", "b"])


class Name(str):
    pass


class Color(enum.IntEnum):
    RED = 1
    GREEN = 2


class Row(list):
    label = "row"

    def total(self):
        return sum(self)


class Shape(abc.ABC):
    def __init__(self, width):
        self.width = width

    @abc.abstractmethod
    def area(self): ...


class Square(Shape):
    def area(self):
        return self.width**2


@pytest.fixture
def tree():
    return {
        "name": "root",
        "tags": ["a", "b", None, 1.5, True],
        "child": {"value": 1, "leaf": {"deep": [1, {"x": "y"}]}},
        "empty": {},
    }


@pytest.fixture
def shared():
    inner = {"x": 1}
    return {"p": inner, "q": inner, "r": [inner, inner]}
