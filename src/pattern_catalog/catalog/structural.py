"""Structural pattern demonstrations."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from pattern_catalog.catalog.registration import demonstration, ensure
from pattern_catalog.domain.demonstration import Category


# Adapter

class Lion(ABC):
    @abstractmethod
    def roar(self) -> str:
        pass


class AfricanLion(Lion):
    def roar(self) -> str:
        return "African lion roars"


class AsianLion(Lion):
    def roar(self) -> str:
        return "Asian lion roars"


class WildDog:
    def bark(self) -> str:
        return "Wild dog barks"


class WildDogAdapter(Lion):
    """Makes a wild dog usable wherever a lion is expected."""

    def __init__(self, dog: WildDog):
        self._dog = dog

    def roar(self) -> str:
        return self._dog.bark()


class Hunter:
    def hunt(self, lion: Lion) -> str:
        return f"Hunter hunts: {lion.roar()}"


@demonstration(
    "adapter",
    Category.STRUCTURAL,
    "Wrap an incompatible object in an adapter to make it compatible with another class",
)
def adapter() -> List[str]:
    hunter = Hunter()
    prey = [AfricanLion(), AsianLion(), WildDogAdapter(WildDog())]
    return [hunter.hunt(lion) for lion in prey]


# Bridge

class Theme(ABC):
    @abstractmethod
    def get_color(self) -> str:
        pass


class DarkTheme(Theme):
    def get_color(self) -> str:
        return "Dark Black"


class LightTheme(Theme):
    def get_color(self) -> str:
        return "Off white"


class WebPage(ABC):
    """Page hierarchy that holds its theme instead of subclassing per theme."""

    def __init__(self, theme: Theme):
        self.theme = theme

    @abstractmethod
    def get_content(self) -> str:
        pass


class About(WebPage):
    def get_content(self) -> str:
        return f"About page in {self.theme.get_color()}"


class Careers(WebPage):
    def get_content(self) -> str:
        return f"Careers page in {self.theme.get_color()}"


@demonstration(
    "bridge",
    Category.STRUCTURAL,
    "Prefer composition over inheritance by separating abstraction from implementation",
)
def bridge() -> List[str]:
    lines = []
    for theme in (DarkTheme(), LightTheme()):
        for page_type in (About, Careers):
            lines.append(page_type(theme).get_content())
    return lines


# Composite

class Employee:
    def __init__(self, role: str, name: str, salary: int):
        self.role = role
        self.name = name
        self.salary = salary

    @property
    def label(self) -> str:
        return f"{self.role} {self.name}"

    def get_salary(self) -> int:
        return self.salary


class Department:
    """Composite node: exposes the same salary interface as a single employee."""

    def __init__(self, name: str):
        self.name = name
        self.members: List[Union[Employee, "Department"]] = []

    @property
    def label(self) -> str:
        return f"Department {self.name}"

    def add(self, member: Union[Employee, "Department"]) -> "Department":
        self.members.append(member)
        return self

    def get_salary(self) -> int:
        return sum(member.get_salary() for member in self.members)


@demonstration(
    "composite",
    Category.STRUCTURAL,
    "Treat individual objects and compositions of objects uniformly",
)
def composite() -> List[str]:
    research = Department("Research").add(Employee("Developer", "Alice Doe", 10000))
    organization = (
        Department("Acme")
        .add(Employee("Developer", "John Doe", 12000))
        .add(Employee("Designer", "Jane Doe", 15000))
        .add(research)
    )

    lines = [f"{member.label}: {member.get_salary()}" for member in organization.members]
    lines.append(f"Net salaries: {organization.get_salary()}")
    return lines


# Decorator

class Coffee(ABC):
    @abstractmethod
    def get_cost(self) -> int:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass


class SimpleCoffee(Coffee):
    def get_cost(self) -> int:
        return 10

    def get_description(self) -> str:
        return "Simple coffee"


class Topping(Coffee):
    """Wraps an owned coffee and adds its own cost and description."""

    def __init__(self, inner: Coffee, description: str, cost: int):
        self._inner = inner
        self._description = description
        self._cost = cost

    def get_cost(self) -> int:
        return self._inner.get_cost() + self._cost

    def get_description(self) -> str:
        return f"{self._inner.get_description()}, {self._description}"


def milk(coffee: Coffee) -> Coffee:
    return Topping(coffee, "milk", 2)


def whip(coffee: Coffee) -> Coffee:
    return Topping(coffee, "whip", 5)


def _coffee_line(coffee: Coffee) -> str:
    return f"{coffee.get_description()}: {coffee.get_cost()}"


@demonstration(
    "decorator",
    Category.STRUCTURAL,
    "Attach new behavior to an object at runtime by wrapping it",
)
def decorator() -> List[str]:
    coffee = SimpleCoffee()
    with_milk = milk(coffee)
    with_milk_and_whip = whip(with_milk)
    reversed_order = milk(whip(SimpleCoffee()))

    ensure(
        with_milk_and_whip.get_cost() == coffee.get_cost() + 2 + 5,
        "decorator",
        "topping costs did not accumulate additively",
    )
    ensure(
        with_milk_and_whip.get_description() != reversed_order.get_description(),
        "decorator",
        "description does not reflect wrapping order",
    )

    return [
        _coffee_line(coffee),
        _coffee_line(with_milk),
        _coffee_line(with_milk_and_whip),
        _coffee_line(reversed_order),
    ]


# Facade

class Computer:
    def __init__(self, events: List[str]):
        self._events = events

    def get_electric_shock(self):
        self._events.append("Ouch!")

    def make_sound(self):
        self._events.append("Beep beep!")

    def show_loading_screen(self):
        self._events.append("Loading..")

    def bam(self):
        self._events.append("Ready to be used!")

    def close_everything(self):
        self._events.append("Bup bup bup buzzz!")

    def sooth(self):
        self._events.append("Haah!")

    def pull_current(self):
        self._events.append("Zzzzz")


class ComputerFacade:
    """Single entry point over the computer's boot and shutdown steps."""

    def __init__(self, computer: Computer):
        self._computer = computer

    def turn_on(self):
        self._computer.get_electric_shock()
        self._computer.make_sound()
        self._computer.show_loading_screen()
        self._computer.bam()

    def turn_off(self):
        self._computer.close_everything()
        self._computer.pull_current()
        self._computer.sooth()


@demonstration(
    "facade",
    Category.STRUCTURAL,
    "Provide a simplified interface to a complex subsystem",
)
def facade() -> List[str]:
    lines: List[str] = []
    computer = ComputerFacade(Computer(lines))
    computer.turn_on()
    computer.turn_off()
    return lines


# Flyweight

class KarakTea:
    def __init__(self, preference: str):
        self.preference = preference


class TeaMaker:
    """Shares one tea object per preference."""

    def __init__(self):
        self._available_tea: Dict[str, KarakTea] = {}

    def make(self, preference: str) -> KarakTea:
        if preference not in self._available_tea:
            self._available_tea[preference] = KarakTea(preference)
        return self._available_tea[preference]

    @property
    def created(self) -> int:
        return len(self._available_tea)


class TeaShop:
    def __init__(self, tea_maker: TeaMaker):
        self._tea_maker = tea_maker
        self._orders: Dict[int, KarakTea] = {}

    def take_order(self, preference: str, table: int):
        self._orders[table] = self._tea_maker.make(preference)

    def tea_for(self, table: int) -> Optional[KarakTea]:
        return self._orders.get(table)

    def serve(self) -> List[str]:
        return [
            f"Serving tea to table #{table}: {tea.preference}"
            for table, tea in self._orders.items()
        ]


@demonstration(
    "flyweight",
    Category.STRUCTURAL,
    "Minimize memory use by sharing as much as possible with similar objects",
)
def flyweight() -> List[str]:
    tea_maker = TeaMaker()
    shop = TeaShop(tea_maker)

    shop.take_order("less sugar", 1)
    shop.take_order("more milk", 2)
    shop.take_order("less sugar", 5)

    lines = shop.serve()
    lines.append(f"Tea objects created: {tea_maker.created}")
    lines.append(f"Tables 1 and 5 share a tea: {shop.tea_for(1) is shop.tea_for(5)}")
    return lines


# Proxy

class LabDoor:
    def __init__(self, events: List[str]):
        self._events = events

    def open(self):
        self._events.append("Opening lab door")

    def close(self):
        self._events.append("Closing lab door")


class SecuredDoor:
    """Controls access to the door it stands in for."""

    PASSWORD = "$ecr@t"

    def __init__(self, door: LabDoor, events: List[str]):
        self._door = door
        self._events = events

    def open(self, password: str):
        if self.authenticate(password):
            self._door.open()
        else:
            self._events.append("Big no! It ain't possible.")

    def authenticate(self, password: str) -> bool:
        return password == self.PASSWORD

    def close(self):
        self._door.close()


@demonstration(
    "proxy",
    Category.STRUCTURAL,
    "Represent the functionality of another class behind an access-controlling stand-in",
)
def proxy() -> List[str]:
    lines: List[str] = []
    door = SecuredDoor(LabDoor(lines), lines)
    door.open("invalid")
    door.open("$ecr@t")
    door.close()
    return lines
