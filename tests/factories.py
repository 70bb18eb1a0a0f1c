"""Test data factories."""

import factory
from faker import Faker

from student_dto.api.schemas.student import StudentDto
from student_dto.infrastructure.persistence.models.student import Student

fake = Faker()


class StudentFactory(factory.Factory):
    """Factory for creating transient Student models."""

    class Meta:
        model = Student

    student_id = factory.Sequence(lambda n: n + 1)
    first_name = factory.LazyAttribute(lambda _: fake.first_name())
    last_name = factory.LazyAttribute(lambda _: fake.last_name())
    year = factory.LazyAttribute(lambda _: fake.random_int(min=1990, max=2030))


class StudentDtoFactory(factory.Factory):
    """Factory for creating StudentDto instances."""

    class Meta:
        model = StudentDto

    student_id = factory.Sequence(lambda n: n + 1)
    first_name = factory.LazyAttribute(lambda _: fake.first_name())
    last_name = factory.LazyAttribute(lambda _: fake.last_name())
    year = factory.LazyAttribute(lambda _: fake.random_int(min=1990, max=2030))


def student_fields(record) -> tuple:
    """Return the four mapped fields of a Student or StudentDto."""
    return (record.student_id, record.first_name, record.last_name, record.year)
