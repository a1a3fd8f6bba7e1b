"""Tests for PersonList index-addressed operations.

Critical Invariants:
- Valid indices are 0..count-1, everything else raises PersonIndexError
- Insertion order is preserved, removal shifts later elements left
- Failed operations leave the list unchanged
"""

import pytest

from personlist import Person, PersonCollection, PersonIndexError, PersonList


def test_new_list_is_empty(people):
    assert people.count() == 0
    assert len(people) == 0
    assert not people


def test_add_appends_at_end(people, roboute, celestina):
    people.add(roboute)
    people.add(celestina)

    assert people.count() == 2
    assert people.get(people.count() - 1) is celestina


def test_added_element_is_returned_unmodified(people, roboute):
    people.add(roboute)

    got = people.get(0)
    assert got is roboute
    assert str(got) == "Roboute Crybaby; Age - 19; Gender - Male"


def test_duplicates_are_allowed(people, roboute):
    people.add(roboute)
    people.add(roboute)

    assert people.count() == 2
    assert people.get(0) is people.get(1)


def test_empty_list_rejects_get_and_remove(people):
    with pytest.raises(PersonIndexError, match="empty"):
        people.get(0)
    with pytest.raises(PersonIndexError):
        people.remove_at(0)


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_indices_raise(people, roboute, celestina, abaddon, index):
    for person in (roboute, celestina, abaddon):
        people.add(person)

    with pytest.raises(PersonIndexError) as info:
        people.get(index)
    assert info.value.index == index
    assert info.value.count == 3

    with pytest.raises(PersonIndexError):
        people.remove_at(index)
    assert people.count() == 3


def test_index_error_is_builtin_index_error(people):
    with pytest.raises(IndexError):
        people.get(0)


def test_non_int_index_raises_type_error(people, roboute):
    people.add(roboute)

    with pytest.raises(TypeError):
        people.get("0")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        people.get(True)


def test_remove_at_shifts_later_elements(people, roboute, abaddon, celestina):
    people.add(roboute)
    people.add(abaddon)
    people.add(celestina)

    people.remove_at(1)

    assert people.count() == 2
    assert people.get(1) is celestina
    assert list(people) == [roboute, celestina]


def test_clear_empties_list(people, roboute, celestina):
    people.add(roboute)
    people.add(celestina)

    people.clear()

    assert people.count() == 0
    with pytest.raises(PersonIndexError):
        people.get(0)


def test_clear_on_empty_list(people):
    people.clear()

    assert people.count() == 0


def test_get_copy_returns_independent_person(people, roboute):
    people.add(roboute)

    clone = people.get(0, copy=True)
    clone.age = 99

    assert clone == Person("Roboute", "Crybaby", 99)
    assert people.get(0).age == 19


def test_getitem_uses_same_bounds(people, roboute):
    people.add(roboute)

    assert people[0] is roboute
    with pytest.raises(PersonIndexError):
        people[-1]


def test_iteration_snapshot_tolerates_mutation(people, roboute, celestina):
    people.add(roboute)
    people.add(celestina)

    seen = []
    for person in people:
        seen.append(person)
        people.clear()

    assert seen == [roboute, celestina]


def test_add_rejects_non_person(people):
    with pytest.raises(TypeError):
        people.add("Roboute Crybaby")  # type: ignore[arg-type]
    assert people.count() == 0


def test_initial_people_kept_in_order(roboute, celestina):
    people = PersonList([roboute, celestina])

    assert list(people) == [roboute, celestina]


def test_person_list_satisfies_protocol(people):
    collection: PersonCollection = people
    assert collection.count() == 0
