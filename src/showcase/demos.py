"""One function per demonstrated feature. Each prints what it shows.

Demos take the runtime Settings so URLs, delays, and the temperature can be
changed through the environment. Coroutine demos are awaited by the runner.
"""

import importlib

from showcase.application import (
    clone_record,
    create_counter,
    describe,
    double_all,
    extend,
    extract_name_and_city,
    factorial,
    fetch_all,
    fetch_data,
    get_data,
    higher_order,
    keep_even,
    split_head,
    sum_numbers,
    temperature_message,
    total,
)
from showcase.application.arithmetic import add, subtract
from showcase.config import Settings
from showcase.domain import Address, Person, PersonRecord, Range, UserProfile
from showcase.infrastructure import CustomEvent, Event, EventTarget, UrllibFetcher

NUMBERS = [1, 2, 3, 4, 5]


def demo_person(settings: Settings) -> None:
    Person(name="John Doe", age=30).introduce()


def demo_counter(settings: Settings) -> None:
    counter = create_counter()
    counter()
    counter()


async def demo_delay(settings: Settings) -> None:
    await fetch_data(settings.delay_ms)


def demo_array_methods(settings: Settings) -> None:
    print(double_all(NUMBERS))
    print(keep_even(NUMBERS))
    print(total(NUMBERS))


async def demo_get_data(settings: Settings) -> None:
    # Errors are logged inside get_data; nothing is raised here.
    await get_data(settings.url("data"), UrllibFetcher(settings.http_timeout))


def demo_button_click(settings: Settings) -> None:
    button = EventTarget("button")
    button.add_event_listener("click", lambda event: print("Button clicked!"))
    button.dispatch_event(Event("click"))


def demo_template_string(settings: Settings) -> None:
    print(describe("John Doe", 30))


def demo_higher_order(settings: Settings) -> None:
    adder = higher_order(add)
    subtractor = higher_order(subtract)
    print(adder(5, 2))
    print(subtractor(5, 2))


def demo_spread(settings: Settings) -> None:
    arr1 = [1, 2, 3]
    arr2 = extend(arr1, 4, 5)
    first, second, rest = split_head(arr2)
    print(first)
    print(second)
    print(rest)


def demo_rest_parameters(settings: Settings) -> None:
    print(sum_numbers(1, 2, 3, 4, 5))


def demo_nested_destructuring(settings: Settings) -> None:
    record = PersonRecord(
        name="John Doe",
        age=30,
        address=Address(street="123 Main St", city="New York", country="USA"),
    )
    person_name, city = extract_name_and_city(record.as_dict())
    print(person_name)
    print(city)


def demo_factorial(settings: Settings) -> None:
    print(factorial(5))


def demo_ternary(settings: Settings) -> None:
    print(temperature_message(settings.temperature))


def demo_object_shorthand(settings: Settings) -> None:
    username = "John Doe"
    age = 25
    UserProfile(username=username, age=age).greeting()


def demo_custom_iterator(settings: Settings) -> None:
    for number in Range(1, 5):
        print(number)


def demo_clone(settings: Settings) -> None:
    person = {"name": "John Doe", "age": 30}
    print(clone_record(person))


async def demo_batch_fetch(settings: Settings) -> None:
    urls = [settings.url("data1"), settings.url("data2")]
    await fetch_all(urls, UrllibFetcher(settings.http_timeout))


def demo_modules(settings: Settings) -> None:
    arithmetic = importlib.import_module("showcase.application.arithmetic")
    print(arithmetic.add(2, 3))


def demo_custom_event(settings: Settings) -> None:
    target = EventTarget()
    target.add_event_listener("myEvent", lambda event: print(event.detail))
    target.dispatch_event(CustomEvent("myEvent", detail="Hello world!"))
