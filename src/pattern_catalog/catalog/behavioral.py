"""Behavioral pattern demonstrations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from pattern_catalog.catalog.registration import demonstration, ensure
from pattern_catalog.domain.demonstration import TIMESTAMP_PLACEHOLDER, Category


# Chain of Responsibility

class Account:
    """Payment handler that forwards requests it cannot satisfy."""

    def __init__(self, name: str, balance: int):
        self.name = name
        self.balance = balance
        self._successor: Optional["Account"] = None

    def set_next(self, account: "Account") -> "Account":
        self._successor = account
        return account

    def can_pay(self, amount: int) -> bool:
        return self.balance >= amount

    def pay(self, amount: int, events: List[str]) -> Optional["Account"]:
        """Pay through the chain; return the handler that accepted, or None."""
        handler: Optional[Account] = self
        while handler is not None:
            if handler.can_pay(amount):
                events.append(f"Paid {amount} using {handler.name}")
                return handler
            if handler._successor is not None:
                events.append(f"Cannot pay using {handler.name}. Proceeding ...")
            else:
                events.append(f"Cannot pay using {handler.name}")
            handler = handler._successor
        return None


def build_payment_chain(accounts: Sequence[Tuple[str, int]]) -> Account:
    """Link accounts in the given order and return the head of the chain."""
    if not accounts:
        raise ValueError("A payment chain needs at least one account")
    head = Account(*accounts[0])
    tail = head
    for name, balance in accounts[1:]:
        tail = tail.set_next(Account(name, balance))
    return head


PAYMENT_ACCOUNTS = (("Bank", 100), ("Paypal", 200), ("Bitcoin", 300))


@demonstration(
    "chain_of_responsibility",
    Category.BEHAVIORAL,
    "Pass a request along a chain of handlers until one of them handles it",
)
def chain_of_responsibility() -> List[str]:
    lines: List[str] = []
    chain = build_payment_chain(PAYMENT_ACCOUNTS)

    handler = chain.pay(259, lines)
    ensure(handler is not None, "chain_of_responsibility", "no account accepted 259")
    lines.append(f"Handled by: {handler.name}")

    declined = chain.pay(500, lines)
    ensure(declined is None, "chain_of_responsibility", "an account accepted 500")
    lines.append("Payment of 500 declined: no account has enough balance")
    return lines


# Command

class Bulb:
    def __init__(self, events: List[str]):
        self._events = events

    def turn_on(self):
        self._events.append("Bulb has been lit!")

    def turn_off(self):
        self._events.append("Darkness!")


class Command(ABC):
    @abstractmethod
    def execute(self):
        pass

    @abstractmethod
    def undo(self):
        pass


class TurnOn(Command):
    def __init__(self, bulb: Bulb):
        self._bulb = bulb

    def execute(self):
        self._bulb.turn_on()

    def undo(self):
        self._bulb.turn_off()


class TurnOff(Command):
    def __init__(self, bulb: Bulb):
        self._bulb = bulb

    def execute(self):
        self._bulb.turn_off()

    def undo(self):
        self._bulb.turn_on()


class RemoteControl:
    """Invoker: executes commands and keeps them for undo."""

    def __init__(self):
        self._history: List[Command] = []

    def submit(self, command: Command):
        command.execute()
        self._history.append(command)

    def undo(self) -> bool:
        if not self._history:
            return False
        self._history.pop().undo()
        return True

    @property
    def history_size(self) -> int:
        return len(self._history)


@demonstration(
    "command",
    Category.BEHAVIORAL,
    "Encapsulate actions in objects, decoupling the invoker from the receiver",
)
def command() -> List[str]:
    lines: List[str] = []
    bulb = Bulb(lines)
    remote = RemoteControl()

    remote.submit(TurnOn(bulb))
    remote.submit(TurnOff(bulb))
    remote.undo()
    remote.undo()

    lines.append(f"Commands in history: {remote.history_size}")
    return lines


# Iterator

class RadioStation:
    def __init__(self, frequency: float):
        self.frequency = frequency


class StationList:
    """Collection exposing its stations through the iterator protocol."""

    def __init__(self):
        self._stations: List[RadioStation] = []

    def add(self, station: RadioStation):
        self._stations.append(station)

    def remove(self, frequency: float):
        self._stations = [s for s in self._stations if s.frequency != frequency]

    def __iter__(self) -> Iterator[RadioStation]:
        return iter(self._stations)

    def __len__(self) -> int:
        return len(self._stations)


@demonstration(
    "iterator",
    Category.BEHAVIORAL,
    "Access the elements of a collection without exposing its representation",
)
def iterator() -> List[str]:
    stations = StationList()
    for frequency in (89, 101, 102, 103.2):
        stations.add(RadioStation(frequency))
    stations.remove(89)

    lines = [f"Station frequency: {station.frequency}" for station in stations]
    lines.append(f"Stations: {len(stations)}")
    return lines


# Mediator

class ChatRoom:
    """Mediator relaying messages between users."""

    def __init__(self, clock: Callable[[], str] = lambda: TIMESTAMP_PLACEHOLDER):
        self._clock = clock
        self.transcript: List[str] = []

    def show_message(self, user: "User", message: str):
        self.transcript.append(f"[{self._clock()}] {user.name}: {message}")


class User:
    def __init__(self, name: str, chat_room: ChatRoom):
        self.name = name
        self._chat_room = chat_room

    def send(self, message: str):
        self._chat_room.show_message(self, message)


@demonstration(
    "mediator",
    Category.BEHAVIORAL,
    "Control the interaction between objects through a mediator object",
)
def mediator() -> List[str]:
    room = ChatRoom()
    john = User("John", room)
    jane = User("Jane", room)

    john.send("Hi there!")
    jane.send("Hey!")

    lines = list(room.transcript)
    lines.append(f"Messages relayed: {len(room.transcript)}")
    return lines


# Memento

@dataclass(frozen=True)
class EditorMemento:
    content: str


class Editor:
    def __init__(self):
        self._content = ""

    def type(self, words: str):
        self._content += words

    @property
    def content(self) -> str:
        return self._content

    def save(self) -> EditorMemento:
        return EditorMemento(self._content)

    def restore(self, memento: EditorMemento):
        self._content = memento.content


@demonstration(
    "memento",
    Category.BEHAVIORAL,
    "Capture and restore an object's state without exposing its internals",
)
def memento() -> List[str]:
    editor = Editor()
    editor.type("This is the first sentence.")
    editor.type(" This is second.")
    saved = editor.save()
    editor.type(" And this is third.")
    lines = [f"Content: {editor.content}"]

    editor.restore(saved)
    lines.append(f"Restored: {editor.content}")
    return lines


# Observer

@dataclass(frozen=True)
class JobPost:
    title: str


class JobSeeker:
    def __init__(self, name: str, inbox: List[str]):
        self.name = name
        self._inbox = inbox

    def on_job_posted(self, job: JobPost):
        self._inbox.append(f"Hi {self.name}! New job posted: {job.title}")


class EmploymentAgency:
    """Subject notifying attached observers about new jobs."""

    def __init__(self):
        self._observers: List[JobSeeker] = []

    def attach(self, observer: JobSeeker):
        self._observers.append(observer)

    def detach(self, observer: JobSeeker):
        self._observers.remove(observer)

    def add_job(self, job: JobPost):
        for observer in self._observers:
            observer.on_job_posted(job)


@demonstration(
    "observer",
    Category.BEHAVIORAL,
    "Notify dependent objects automatically when a subject changes state",
)
def observer() -> List[str]:
    lines: List[str] = []
    john = JobSeeker("John Doe", lines)
    jane = JobSeeker("Jane Doe", lines)

    agency = EmploymentAgency()
    agency.attach(john)
    agency.attach(jane)
    agency.add_job(JobPost("Software Engineer"))

    agency.detach(jane)
    agency.add_job(JobPost("Designer"))
    return lines


# Visitor

class AnimalKind(str, Enum):
    MONKEY = "monkey"
    LION = "lion"
    DOLPHIN = "dolphin"


@dataclass(frozen=True)
class Animal:
    kind: AnimalKind


class AnimalOperation:
    """Operation over the closed set of animal kinds, one entry per kind."""

    def __init__(self, name: str, table: Dict[AnimalKind, str]):
        missing = [kind.value for kind in AnimalKind if kind not in table]
        if missing:
            raise ValueError(f"Operation '{name}' does not handle: {', '.join(missing)}")
        self.name = name
        self._table = dict(table)

    def visit(self, animal: Animal) -> str:
        return self._table[animal.kind]


SPEAK = AnimalOperation(
    "speak",
    {
        AnimalKind.MONKEY: "Ooh oo aa aa!",
        AnimalKind.LION: "Roaaar!",
        AnimalKind.DOLPHIN: "Tuut tuttu tuutt!",
    },
)

JUMP = AnimalOperation(
    "jump",
    {
        AnimalKind.MONKEY: "Jumped 20 feet high! on to the tree!",
        AnimalKind.LION: "Jumped 7 feet! Back on the ground!",
        AnimalKind.DOLPHIN: "Walked on water a little and disappeared",
    },
)


@demonstration(
    "visitor",
    Category.BEHAVIORAL,
    "Add operations over a set of types without modifying those types",
)
def visitor() -> List[str]:
    animals = [Animal(kind) for kind in AnimalKind]
    return [operation.visit(animal) for operation in (SPEAK, JUMP) for animal in animals]


# Strategy

class SortStrategy(ABC):
    name = ""

    @abstractmethod
    def sort(self, data: List[int]) -> List[int]:
        pass


class BubbleSortStrategy(SortStrategy):
    name = "bubble sort"

    def sort(self, data: List[int]) -> List[int]:
        items = list(data)
        for end in range(len(items) - 1, 0, -1):
            for i in range(end):
                if items[i] > items[i + 1]:
                    items[i], items[i + 1] = items[i + 1], items[i]
        return items


class QuickSortStrategy(SortStrategy):
    name = "quick sort"

    def sort(self, data: List[int]) -> List[int]:
        if len(data) <= 1:
            return list(data)
        pivot, rest = data[0], data[1:]
        return (
            self.sort([x for x in rest if x < pivot])
            + [pivot]
            + self.sort([x for x in rest if x >= pivot])
        )


class Sorter:
    def __init__(self, strategy: SortStrategy):
        self._strategy = strategy

    def sort(self, data: List[int]) -> str:
        return f"Sorting using {self._strategy.name}: {self._strategy.sort(data)}"


@demonstration(
    "strategy",
    Category.BEHAVIORAL,
    "Switch algorithm or strategy based on the situation",
)
def strategy() -> List[str]:
    dataset = [1, 5, 4, 3, 2, 8]
    return [Sorter(s).sort(dataset) for s in (BubbleSortStrategy(), QuickSortStrategy())]


# State

class WritingState(ABC):
    @abstractmethod
    def write(self, words: str) -> str:
        pass


class DefaultText(WritingState):
    def write(self, words: str) -> str:
        return words


class UpperCase(WritingState):
    def write(self, words: str) -> str:
        return words.upper()


class LowerCase(WritingState):
    def write(self, words: str) -> str:
        return words.lower()


class TextEditor:
    """Delegates writing to its current state object."""

    def __init__(self, state: WritingState):
        self._state = state

    def set_state(self, state: WritingState):
        self._state = state

    def type(self, words: str) -> str:
        return self._state.write(words)


@demonstration(
    "state",
    Category.BEHAVIORAL,
    "Change an object's behavior when its internal state changes",
)
def state() -> List[str]:
    editor = TextEditor(DefaultText())
    lines = [editor.type("First line")]

    editor.set_state(UpperCase())
    lines.append(editor.type("Second line"))
    lines.append(editor.type("Third line"))

    editor.set_state(LowerCase())
    lines.append(editor.type("Fourth line"))
    lines.append(editor.type("Fifth line"))
    return lines


# Template Method

class Builder(ABC):
    """Fixes the build skeleton; subclasses supply the steps."""

    def build(self) -> List[str]:
        return [self.test(), self.lint(), self.assemble(), self.deploy()]

    @abstractmethod
    def test(self) -> str:
        pass

    @abstractmethod
    def lint(self) -> str:
        pass

    @abstractmethod
    def assemble(self) -> str:
        pass

    @abstractmethod
    def deploy(self) -> str:
        pass


class AndroidBuilder(Builder):
    def test(self) -> str:
        return "Running android tests"

    def lint(self) -> str:
        return "Linting the android code"

    def assemble(self) -> str:
        return "Assembling the android build"

    def deploy(self) -> str:
        return "Deploying android build to server"


class IosBuilder(Builder):
    def test(self) -> str:
        return "Running ios tests"

    def lint(self) -> str:
        return "Linting the ios code"

    def assemble(self) -> str:
        return "Assembling the ios build"

    def deploy(self) -> str:
        return "Deploying ios build to server"


@demonstration(
    "template_method",
    Category.BEHAVIORAL,
    "Define the skeleton of an algorithm and defer some steps to subclasses",
)
def template_method() -> List[str]:
    return AndroidBuilder().build() + IosBuilder().build()
