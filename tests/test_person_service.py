import pytest

from app.services import Err, InMemoryPersonService, Ok, OutOfRangeError, sample_people
from tests.factories import make_person


def test_get_all_preserves_insertion_order(person_service, people):
    assert person_service.get_all() == people


def test_get_all_returns_a_copy(person_service):
    person_service.get_all().clear()

    assert len(person_service) == 3


def test_get_one_is_one_based(person_service, people):
    result = person_service.get_one(1)

    assert isinstance(result, Ok)
    assert result.value == people[0]


@pytest.mark.parametrize("index", [0, -1, 4, 20])
def test_get_one_out_of_range_returns_err(person_service, index):
    result = person_service.get_one(index)

    assert isinstance(result, Err)
    assert isinstance(result.error, OutOfRangeError)
    assert result.error.message == "Index out of range"


def test_create_appends(person_service):
    person = make_person("Dung")

    person_service.create(person)

    assert len(person_service) == 4
    assert person_service.get_all()[-1] == person


def test_update_replaces_in_place(person_service):
    person = make_person("Renamed")

    person_service.update(2, person)

    assert person_service.get_one(2).value == person
    assert len(person_service) == 3


def test_update_out_of_range_raises(person_service):
    with pytest.raises(OutOfRangeError):
        person_service.update(9, make_person())


def test_delete_removes_at_position(person_service, people):
    person_service.delete(1)

    assert person_service.get_all() == people[1:]


def test_delete_out_of_range_raises(person_service):
    with pytest.raises(OutOfRangeError, match="Index out of range"):
        person_service.delete(4)


def test_instances_do_not_share_state(people):
    first = InMemoryPersonService(people)
    second = InMemoryPersonService(people)

    first.create(make_person("Extra"))
    second.delete(1)

    assert len(first) == 4
    assert len(second) == 2
    assert len(people) == 3


def test_out_of_range_is_an_index_error():
    assert isinstance(OutOfRangeError(), IndexError)


def test_sample_people_seed():
    service = InMemoryPersonService(sample_people())

    assert len(service) == 3
    assert service.get_one(1).value.full_name == "Nguyen Thanh Nam"


def test_create_rejects_non_person_without_touching_store(person_service, people):
    with pytest.raises(TypeError):
        person_service.create(None)

    assert len(person_service) == 3
    assert person_service.get_all() == people


def test_update_rejects_non_person_without_touching_store(person_service, people):
    with pytest.raises(TypeError):
        person_service.update(1, None)

    assert person_service.get_all() == people
