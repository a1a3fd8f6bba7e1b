import random

from personlist import (
    Gender,
    LanguageMismatchError,
    Person,
    PersonIndexError,
    PersonList,
    random_person,
)

people = PersonList()
people.add(Person("roboute", "crybaby", 19, Gender.MALE))
people.add(Person("celestina", "holy", 7, Gender.FEMALE))
people.add(random_person(random.Random(42)))

for person in people:
    print(person)

person = people.get(0)
try:
    person.surname = "Жиганов"
except LanguageMismatchError as exc:
    print(f"Rejected: {exc}")

people.remove_at(0)
print(f"{people.count()} left, first is {people.get(0)}")

people.clear()
try:
    people.get(0)
except PersonIndexError as exc:
    print(f"Rejected: {exc}")
