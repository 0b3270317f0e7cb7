"""
Tests for the Faker based model factories.
"""
import re
import unittest
from abc import ABC
from datetime import date
from unittest.mock import Mock, patch

from fakehook.generators import ModelFactory, PersonFactory, generate_people, calculate_age, DEFAULT_LOCALE
from fakehook.models import Person


class TestModelFactory(unittest.TestCase):
    """Test ModelFactory abstract base class."""

    def test_model_factory_is_abstract(self):
        self.assertTrue(issubclass(ModelFactory, ABC))
        self.assertIn('create', ModelFactory.__abstractmethods__)
        with self.assertRaises(TypeError):
            ModelFactory()

    def test_create_many_rejects_negative_count(self):
        with self.assertRaises(ValueError):
            PersonFactory().create_many(-1)

    def test_create_many_zero_returns_empty_list(self):
        self.assertEqual(PersonFactory().create_many(0), [])

    def test_default_locale(self):
        self.assertEqual(PersonFactory().locale, DEFAULT_LOCALE)


class TestPersonFactory(unittest.TestCase):
    """Test PersonFactory."""

    def test_create_returns_valid_person(self):
        """
        Test that generated people pass model validation.
        """
        factory = PersonFactory(seed=7)
        for person in factory.create_many(25):
            self.assertIsInstance(person, Person)
            person.validate()

    def test_age_matches_birth_date_and_window(self):
        factory = PersonFactory(seed=3, minimum_age=20, maximum_age=30)
        for person in factory.create_many(25):
            self.assertEqual(person.age, calculate_age(person.birth_date))
            self.assertGreaterEqual(person.age, 20)
            self.assertLessEqual(person.age, 30)

    def test_address_is_single_line(self):
        for person in PersonFactory(seed=11).create_many(10):
            self.assertNotIn('\n', person.address)

    def test_email_is_built_from_names(self):
        person = PersonFactory(seed=5).create()
        local_part = person.email.split('@')[0]
        self.assertTrue(re.fullmatch(r'[a-z0-9]+\.[a-z0-9]+', local_part))
        self.assertTrue(local_part.startswith(re.sub(r'[^a-z0-9]', '', person.first_name.lower())))

    def test_email_falls_back_when_names_have_no_ascii_letters(self):
        factory = PersonFactory(seed=1)
        factory.faker = Mock()
        factory.faker.email.return_value = 'random@example.org'

        self.assertEqual(factory._email_for('山田', '太郎'), 'random@example.org')
        factory.faker.email.assert_called_once_with()

    def test_email_strips_accents(self):
        factory = PersonFactory(seed=1)
        factory.faker = Mock()
        factory.faker.free_email_domain.return_value = 'example.org'

        self.assertEqual(factory._email_for('Zoë', "O'Brien"), 'zoe.obrien@example.org')

    def test_seed_makes_output_reproducible(self):
        first = PersonFactory(seed=42).create_many(5)
        second = PersonFactory(seed=42).create_many(5)
        self.assertEqual([p.as_dict() for p in first], [p.as_dict() for p in second])

    def test_other_locale(self):
        for person in PersonFactory(locale='de_DE', seed=2).create_many(10):
            person.validate()

    def test_minimum_age_zero_still_yields_past_birth_date(self):
        for person in PersonFactory(seed=9, minimum_age=0, maximum_age=0).create_many(10):
            self.assertLess(person.birth_date, date.today())
            person.validate()

    def test_invalid_age_window(self):
        with self.assertRaises(ValueError):
            PersonFactory(minimum_age=50, maximum_age=40)
        with self.assertRaises(ValueError):
            PersonFactory(minimum_age=-1)
        with self.assertRaises(ValueError):
            PersonFactory(maximum_age=151)


class TestGeneratePeople(unittest.TestCase):
    def test_generate_people_count(self):
        people = generate_people(3, seed=1)
        self.assertEqual(len(people), 3)
        self.assertTrue(all(isinstance(p, Person) for p in people))

    def test_generate_people_passes_locale_and_seed(self):
        with patch('fakehook.generators.person.PersonFactory') as mock_factory:
            generate_people(2, locale='fr_FR', seed=9)
            mock_factory.assert_called_once_with(locale='fr_FR', seed=9)
            mock_factory.return_value.create_many.assert_called_once_with(2)


class TestCalculateAge(unittest.TestCase):
    def test_before_and_after_birthday(self):
        birth_date = date(2000, 6, 15)
        self.assertEqual(calculate_age(birth_date, today=date(2020, 6, 14)), 19)
        self.assertEqual(calculate_age(birth_date, today=date(2020, 6, 15)), 20)
        self.assertEqual(calculate_age(birth_date, today=date(2020, 12, 1)), 20)


class TestFactoryLocale(unittest.TestCase):
    def test_unknown_locale(self):
        with self.assertRaises(ValueError) as context:
            PersonFactory(locale='xx_YY')
        self.assertIn('xx_YY', str(context.exception))
