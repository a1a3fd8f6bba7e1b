"""Console demo for person lists.

Usage:
    personlist                # Interactive demo, waits for ENTER between steps
    personlist --no-pause     # Run through without waiting
    personlist --seed 42      # Reproducible random person
"""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable, Iterable, Sequence

from pydantic import ValidationError

from personlist.config import LOG_LEVELS, ConsoleSettings
from personlist.core.person import (
    MAX_AGE,
    MIN_AGE,
    Gender,
    Person,
    PersonBuilder,
    PersonValidationError,
    random_person,
)
from personlist.storage import PersonList

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Say = Callable[[str], None]

GENDER_CHOICES = {1: Gender.MALE, 2: Gender.FEMALE}


class ConsoleInputError(ValueError):
    """Raised when typed input cannot be turned into a field value."""

    pass


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the root logger with a single console handler.

    Args:
        level: Level name ("DEBUG") or number.

    Returns:
        Configured root logger.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(handler)
    return root


def print_list(people: Iterable[Person], say: Say = print) -> None:
    """Print every person on its own line, or a note for an empty list."""
    empty = True
    for person in people:
        say(str(person))
        empty = False
    if empty:
        say("List is empty.")


def _read_name(raw: str) -> str:
    if raw == "":
        raise ConsoleInputError("Value must not be empty.")
    return raw


def _read_age(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConsoleInputError(f"Age value must be in range [{MIN_AGE}:{MAX_AGE}].") from None


def _read_gender(raw: str) -> Gender:
    try:
        choice = int(raw)
    except ValueError:
        choice = 0
    if choice not in GENDER_CHOICES:
        raise ConsoleInputError("Number must be in range [1; 2].")
    return GENDER_CHOICES[choice]


def input_person(ask: Ask = input, say: Say = print) -> Person:
    """Read a person field by field, re-asking a field until it is accepted.

    Args:
        ask: Prompt function returning the typed line.
        say: Output function for error messages.

    Returns:
        Person built from the accepted values.
    """
    builder = PersonBuilder()
    steps: list[tuple[str, str, Callable[[str], None]]] = [
        ("name", "Enter student name: ", lambda raw: builder.with_name(_read_name(raw))),
        (
            "surname",
            "Enter student surname: ",
            lambda raw: builder.with_surname(_read_name(raw)),
        ),
        ("age", "Enter student age: ", lambda raw: builder.with_age(_read_age(raw))),
        (
            "gender",
            "Enter student gender (1 - Male or 2 - Female): ",
            lambda raw: builder.with_gender(_read_gender(raw)),
        ),
    ]

    for field_name, prompt, apply in steps:
        while True:
            try:
                apply(ask(prompt))
                break
            except (PersonValidationError, ConsoleInputError) as exc:
                logger.debug("Rejected %s: %s", field_name, exc)
                say(
                    f"Incorrect {field_name}. Error: {exc} "
                    f"Please, enter the {field_name} again."
                )

    return builder.build()


def demo_lists() -> tuple[PersonList, PersonList]:
    """Create the two demo lists (olds, youth)."""
    olds = PersonList(
        [
            Person("God", "Emperror", 122, Gender.MALE),
            Person("Chorus", "Traitor", 70, Gender.MALE),
            Person("Sangiunius", "Primarch", 66, Gender.MALE),
        ]
    )
    youth = PersonList(
        [
            Person("Roboute", "Crybaby", 19, Gender.MALE),
            Person("Abaddon", "Vredina", 14, Gender.MALE),
            Person("Celestina", "Holy", 7, Gender.FEMALE),
        ]
    )
    return olds, youth


def _show(olds: PersonList, youth: PersonList, say: Say) -> None:
    say("List of olds:")
    print_list(olds, say)
    say("List of youth:")
    print_list(youth, say)


def run_demo(
    ask: Ask = input,
    say: Say = print,
    pause: bool = True,
    rng: random.Random | None = None,
) -> None:
    """Walk through list operations, interactive input and random generation.

    Args:
        ask: Prompt function returning the typed line.
        say: Output function.
        pause: Wait for ENTER between steps.
        rng: Random source for the random person.
    """

    def wait() -> None:
        if pause:
            ask("")

    olds, youth = demo_lists()

    if pause:
        say("To continue, press ENTER")
    wait()
    _show(olds, youth, say)

    wait()
    olds.add(Person("Magnus", "Nottraitor", 48, Gender.MALE))
    say("New person has been added to the 1st list")

    wait()
    youth.add(olds.get(1))
    say("Second person from the 1st list has been added to the 2nd list")

    wait()
    _show(olds, youth, say)

    wait()
    olds.remove_at(1)
    say("Second person from the 1st list has been removed")

    wait()
    _show(olds, youth, say)

    wait()
    youth.clear()
    say("2nd list (youth) has been cleared")
    say("List of youth:")
    print_list(youth, say)
    say("")

    wait()
    say(str(input_person(ask, say)))

    wait()
    say(f"Random person is: {random_person(rng)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="personlist", description="Person list console demo")
    parser.add_argument(
        "--no-pause",
        dest="pause",
        action="store_false",
        default=None,
        help="Do not wait for ENTER between steps",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random person")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Flags override ConsoleSettings values."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = ConsoleSettings()
    except ValidationError as exc:
        parser.error(f"invalid PERSONLIST_* setting: {exc}")

    pause = settings.pause if args.pause is None else args.pause
    seed = settings.seed if args.seed is None else args.seed
    setup_logging(args.log_level or settings.log_level)

    rng = random.Random(seed) if seed is not None else None
    try:
        run_demo(ask=input, say=print, pause=pause, rng=rng)
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
