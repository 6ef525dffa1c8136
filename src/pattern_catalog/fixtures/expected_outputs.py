"""Golden expected output for every catalog demonstration."""

from typing import Dict, List, Optional, Tuple

from pattern_catalog.domain.validation import ExpectedOutput

EXPECTED_OUTPUTS: Dict[str, Tuple[str, ...]] = {
    # Creational
    "simple_factory": (
        "Door width: 100",
        "Door height: 200",
        "Second door: 50x100",
        "Distinct instances: True",
    ),
    "factory_method": (
        "DevelopmentManager: Asking about design patterns!",
        "MarketingManager: Asking about community building",
    ),
    "abstract_factory": (
        "I am a wooden door",
        "I can only fit wooden doors",
        "I am an iron door",
        "I can only fit iron doors",
    ),
    "builder": (
        "Burger size: 14",
        "Toppings: cheese=False, pepperoni=True, lettuce=True, tomato=True",
    ),
    "prototype": (
        "Original: Jolly (Mountain Sheep)",
        "Clone: Dolly (Mountain Sheep)",
        "Clone is a separate object: True",
        "Original tags: wool",
        "Clone tags: wool, cloned",
    ),
    "singleton": (
        "Initializing president",
        "First access: president-1",
        "Second access: president-1",
        "Same instance: True",
        "Instances created: 1",
    ),
    # Structural
    "adapter": (
        "Hunter hunts: African lion roars",
        "Hunter hunts: Asian lion roars",
        "Hunter hunts: Wild dog barks",
    ),
    "bridge": (
        "About page in Dark Black",
        "Careers page in Dark Black",
        "About page in Off white",
        "Careers page in Off white",
    ),
    "composite": (
        "Developer John Doe: 12000",
        "Designer Jane Doe: 15000",
        "Department Research: 10000",
        "Net salaries: 37000",
    ),
    "decorator": (
        "Simple coffee: 10",
        "Simple coffee, milk: 12",
        "Simple coffee, milk, whip: 17",
        "Simple coffee, whip, milk: 17",
    ),
    "facade": (
        "Ouch!",
        "Beep beep!",
        "Loading..",
        "Ready to be used!",
        "Bup bup bup buzzz!",
        "Zzzzz",
        "Haah!",
    ),
    "flyweight": (
        "Serving tea to table #1: less sugar",
        "Serving tea to table #2: more milk",
        "Serving tea to table #5: less sugar",
        "Tea objects created: 2",
        "Tables 1 and 5 share a tea: True",
    ),
    "proxy": (
        "Big no! It ain't possible.",
        "Opening lab door",
        "Closing lab door",
    ),
    # Behavioral
    "chain_of_responsibility": (
        "Cannot pay using Bank. Proceeding ...",
        "Cannot pay using Paypal. Proceeding ...",
        "Paid 259 using Bitcoin",
        "Handled by: Bitcoin",
        "Cannot pay using Bank. Proceeding ...",
        "Cannot pay using Paypal. Proceeding ...",
        "Cannot pay using Bitcoin",
        "Payment of 500 declined: no account has enough balance",
    ),
    "command": (
        "Bulb has been lit!",
        "Darkness!",
        "Bulb has been lit!",
        "Darkness!",
        "Commands in history: 0",
    ),
    "iterator": (
        "Station frequency: 101",
        "Station frequency: 102",
        "Station frequency: 103.2",
        "Stations: 3",
    ),
    "mediator": (
        "[<timestamp>] John: Hi there!",
        "[<timestamp>] Jane: Hey!",
        "Messages relayed: 2",
    ),
    "memento": (
        "Content: This is the first sentence. This is second. And this is third.",
        "Restored: This is the first sentence. This is second.",
    ),
    "observer": (
        "Hi John Doe! New job posted: Software Engineer",
        "Hi Jane Doe! New job posted: Software Engineer",
        "Hi John Doe! New job posted: Designer",
    ),
    "visitor": (
        "Ooh oo aa aa!",
        "Roaaar!",
        "Tuut tuttu tuutt!",
        "Jumped 20 feet high! on to the tree!",
        "Jumped 7 feet! Back on the ground!",
        "Walked on water a little and disappeared",
    ),
    "strategy": (
        "Sorting using bubble sort: [1, 2, 3, 4, 5, 8]",
        "Sorting using quick sort: [1, 2, 3, 4, 5, 8]",
    ),
    "state": (
        "First line",
        "SECOND LINE",
        "THIRD LINE",
        "fourth line",
        "fifth line",
    ),
    "template_method": (
        "Running android tests",
        "Linting the android code",
        "Assembling the android build",
        "Deploying android build to server",
        "Running ios tests",
        "Linting the ios code",
        "Assembling the ios build",
        "Deploying ios build to server",
    ),
}


def load_expected_outputs(names: Optional[List[str]] = None) -> List[ExpectedOutput]:
    """
    Get bundled expectations as ExpectedOutput objects.

    Args:
        names: Restrict to these pattern names, in this order. Names without a
            bundled fixture are skipped; the validator reports them.
    """
    selected = names if names is not None else list(EXPECTED_OUTPUTS)
    return [
        ExpectedOutput(name=name, lines=EXPECTED_OUTPUTS[name])
        for name in selected
        if name in EXPECTED_OUTPUTS
    ]
