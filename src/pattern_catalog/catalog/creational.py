"""Creational pattern demonstrations."""

import copy
import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.catalog.registration import demonstration, ensure
from pattern_catalog.domain.demonstration import Category


# Simple Factory

class Door(ABC):
    """Door interface."""

    @abstractmethod
    def get_width(self) -> int:
        pass

    @abstractmethod
    def get_height(self) -> int:
        pass


class WoodenDoor(Door):
    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height


class DoorFactory:
    """Hides door construction behind a single creation method."""

    @staticmethod
    def make_door(width: int, height: int) -> Door:
        return WoodenDoor(width, height)


@demonstration(
    "simple_factory",
    Category.CREATIONAL,
    "Generate an instance for the client without exposing instantiation logic",
)
def simple_factory() -> List[str]:
    door = DoorFactory.make_door(100, 200)
    other = DoorFactory.make_door(50, 100)
    return [
        f"Door width: {door.get_width()}",
        f"Door height: {door.get_height()}",
        f"Second door: {other.get_width()}x{other.get_height()}",
        f"Distinct instances: {door is not other}",
    ]


# Factory Method

class Interviewer(ABC):
    @abstractmethod
    def ask_questions(self) -> str:
        pass


class Developer(Interviewer):
    def ask_questions(self) -> str:
        return "Asking about design patterns!"


class CommunityExecutive(Interviewer):
    def ask_questions(self) -> str:
        return "Asking about community building"


class HiringManager(ABC):
    """Delegates interviewer creation to subclasses."""

    @abstractmethod
    def make_interviewer(self) -> Interviewer:
        pass

    def take_interview(self) -> str:
        return self.make_interviewer().ask_questions()


class DevelopmentManager(HiringManager):
    def make_interviewer(self) -> Interviewer:
        return Developer()


class MarketingManager(HiringManager):
    def make_interviewer(self) -> Interviewer:
        return CommunityExecutive()


@demonstration(
    "factory_method",
    Category.CREATIONAL,
    "Delegate the choice of concrete product to subclasses",
)
def factory_method() -> List[str]:
    managers = [DevelopmentManager(), MarketingManager()]
    return [f"{type(manager).__name__}: {manager.take_interview()}" for manager in managers]


# Abstract Factory

class DescribedDoor(ABC):
    @abstractmethod
    def get_description(self) -> str:
        pass


class FittingExpert(ABC):
    @abstractmethod
    def get_description(self) -> str:
        pass


class PlainWoodenDoor(DescribedDoor):
    def get_description(self) -> str:
        return "I am a wooden door"


class IronDoor(DescribedDoor):
    def get_description(self) -> str:
        return "I am an iron door"


class Carpenter(FittingExpert):
    def get_description(self) -> str:
        return "I can only fit wooden doors"


class Welder(FittingExpert):
    def get_description(self) -> str:
        return "I can only fit iron doors"


class DoorFamilyFactory(ABC):
    """Creates a door together with the expert able to fit it."""

    @abstractmethod
    def make_door(self) -> DescribedDoor:
        pass

    @abstractmethod
    def make_fitting_expert(self) -> FittingExpert:
        pass


class WoodenDoorFactory(DoorFamilyFactory):
    def make_door(self) -> DescribedDoor:
        return PlainWoodenDoor()

    def make_fitting_expert(self) -> FittingExpert:
        return Carpenter()


class IronDoorFactory(DoorFamilyFactory):
    def make_door(self) -> DescribedDoor:
        return IronDoor()

    def make_fitting_expert(self) -> FittingExpert:
        return Welder()


@demonstration(
    "abstract_factory",
    Category.CREATIONAL,
    "Group factories of related objects without specifying concrete classes",
)
def abstract_factory() -> List[str]:
    lines = []
    for factory in (WoodenDoorFactory(), IronDoorFactory()):
        lines.append(factory.make_door().get_description())
        lines.append(factory.make_fitting_expert().get_description())
    return lines


# Builder

class Burger:
    def __init__(self, builder: "BurgerBuilder"):
        self.size = builder.size
        self.cheese = builder.cheese
        self.pepperoni = builder.pepperoni
        self.lettuce = builder.lettuce
        self.tomato = builder.tomato

    def describe(self) -> List[str]:
        toppings = ", ".join(
            f"{topping}={getattr(self, topping)}"
            for topping in ("cheese", "pepperoni", "lettuce", "tomato")
        )
        return [f"Burger size: {self.size}", f"Toppings: {toppings}"]


class BurgerBuilder:
    """Accumulates optional parts step by step, then builds the burger."""

    def __init__(self, size: int):
        self.size = size
        self.cheese = False
        self.pepperoni = False
        self.lettuce = False
        self.tomato = False

    def add_cheese(self) -> "BurgerBuilder":
        self.cheese = True
        return self

    def add_pepperoni(self) -> "BurgerBuilder":
        self.pepperoni = True
        return self

    def add_lettuce(self) -> "BurgerBuilder":
        self.lettuce = True
        return self

    def add_tomato(self) -> "BurgerBuilder":
        self.tomato = True
        return self

    def build(self) -> Burger:
        return Burger(self)


@demonstration(
    "builder",
    Category.CREATIONAL,
    "Construct different flavors of an object step by step, avoiding constructor pollution",
)
def builder() -> List[str]:
    burger = BurgerBuilder(14).add_pepperoni().add_lettuce().add_tomato().build()
    return burger.describe()


# Prototype

class Sheep:
    def __init__(self, name: str, category: str = "Mountain Sheep"):
        self.name = name
        self.category = category
        self.tags: List[str] = []

    def clone(self) -> "Sheep":
        return copy.deepcopy(self)


@demonstration(
    "prototype",
    Category.CREATIONAL,
    "Create objects by cloning an existing object",
)
def prototype() -> List[str]:
    original = Sheep("Jolly")
    original.tags.append("wool")

    cloned = original.clone()
    cloned.name = "Dolly"
    cloned.tags.append("cloned")

    return [
        f"Original: {original.name} ({original.category})",
        f"Clone: {cloned.name} ({cloned.category})",
        f"Clone is a separate object: {cloned is not original}",
        f"Original tags: {', '.join(original.tags)}",
        f"Clone tags: {', '.join(cloned.tags)}",
    ]


# Singleton

class President:
    def __init__(self, token: str):
        self.token = token


class PresidentOffice:
    """
    Guarded single-instance access point.

    The president is created lazily on first access. Creation is serialized
    with double-checked locking, so concurrent first accesses still create
    exactly one instance. The office itself is an explicit handle owned by
    whoever constructs it.
    """

    def __init__(self, events: Optional[List[str]] = None):
        self._lock = threading.Lock()
        self._president: Optional[President] = None
        self._created = 0
        self._events = events if events is not None else []

    def get_president(self) -> President:
        if self._president is None:
            with self._lock:
                if self._president is None:
                    self._created += 1
                    self._events.append("Initializing president")
                    self._president = President(f"president-{self._created}")
        return self._president

    @property
    def instances_created(self) -> int:
        return self._created


@demonstration(
    "singleton",
    Category.CREATIONAL,
    "Ensure only one object of a particular class is ever created",
)
def singleton() -> List[str]:
    lines: List[str] = []
    office = PresidentOffice(lines)

    first = office.get_president()
    lines.append(f"First access: {first.token}")
    second = office.get_president()
    lines.append(f"Second access: {second.token}")

    ensure(first is second, "singleton", "two accesses returned different instances")
    lines.append(f"Same instance: {first is second}")
    lines.append(f"Instances created: {office.instances_created}")
    return lines
