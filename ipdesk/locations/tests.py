"""
Tests for the location table, the cascading resolver and the locations API
"""
from django.test import SimpleTestCase
from rest_framework import status
from ipdesk.core.test_utils import BaseAPITestCase, TestDataFactory, AuthenticatedAPIClient
from .data import LOCATION_TABLE
from .resolver import (
    AddressSelection, COUNTRY, STATE, CITY,
    is_consistent, list_cities, list_countries, list_states,
)
from .serializers import AddressSerializer


class LocationTableTests(SimpleTestCase):
    """Shape of the static table"""

    def test_every_state_has_cities(self):
        for country in list_countries():
            for state in list_states(country):
                self.assertTrue(list_cities(country, state), f"{country}/{state} has no cities")

    def test_no_country_without_states(self):
        for country in list_countries():
            self.assertTrue(list_states(country), f"{country} has no states")

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            LOCATION_TABLE['Atlantis'] = {}

    def test_canada_ontario_cities(self):
        self.assertEqual(
            list_cities('Canada', 'Ontario'),
            ['Toronto', 'Ottawa', 'Hamilton', 'London', 'Kitchener'],
        )

    def test_australia_has_victoria(self):
        self.assertIn('Victoria', list_states('Australia'))


class ResolverTests(SimpleTestCase):
    """Cascade rules and tolerant lookups"""

    def test_unknown_country_has_no_states(self):
        self.assertEqual(list_states('NonexistentCountry'), [])

    def test_unset_keys_give_empty_lists(self):
        self.assertEqual(list_states(''), [])
        self.assertEqual(list_cities('', ''), [])
        self.assertEqual(list_cities('Canada', ''), [])
        self.assertEqual(list_cities('Canada', 'Atlantis'), [])
        self.assertEqual(list_cities('Atlantis', 'Ontario'), [])

    def test_country_change_clears_state_and_city(self):
        selection = AddressSelection('Canada', 'Ontario', 'Toronto')
        for new_country in ('Australia', 'Canada', '', 'NonexistentCountry'):
            changed = selection.on_country_change(new_country)
            self.assertEqual(changed.country, new_country)
            self.assertEqual(changed.state, '')
            self.assertEqual(changed.city, '')

    def test_state_change_clears_city(self):
        selection = AddressSelection('Canada', 'Ontario', 'Toronto')
        changed = selection.on_state_change('British Columbia')
        self.assertEqual(changed, AddressSelection('Canada', 'British Columbia', ''))
        self.assertEqual(selection.on_state_change('Ontario').city, '')

    def test_city_change_does_not_cascade(self):
        selection = AddressSelection('Canada', 'Ontario', 'Toronto')
        self.assertEqual(selection.on_city_change('Ottawa'), AddressSelection('Canada', 'Ontario', 'Ottawa'))

    def test_switch_to_australia(self):
        selection = AddressSelection().on_country_change('Canada').on_state_change('Ontario')
        self.assertEqual(selection.options()[CITY], ['Toronto', 'Ottawa', 'Hamilton', 'London', 'Kitchener'])
        selection = selection.on_city_change('Toronto').on_country_change('Australia')
        self.assertEqual((selection.state, selection.city), ('', ''))
        self.assertIn('Victoria', selection.options()[STATE])
        self.assertEqual(selection.options()[CITY], [])

    def test_change_dispatch(self):
        selection = AddressSelection('Canada', 'Ontario', 'Toronto')
        self.assertEqual(selection.change(COUNTRY, 'Australia'), AddressSelection('Australia', '', ''))
        self.assertEqual(selection.change(STATE, 'Quebec'), AddressSelection('Canada', 'Quebec', ''))
        with self.assertRaises(ValueError):
            selection.change('planet', 'Earth')

    def test_enabled_flags(self):
        self.assertTrue(AddressSelection().is_enabled(COUNTRY))
        self.assertFalse(AddressSelection().is_enabled(STATE))
        self.assertTrue(AddressSelection('Canada').is_enabled(STATE))
        self.assertFalse(AddressSelection('Canada').is_enabled(CITY))
        self.assertTrue(AddressSelection('Canada', 'Ontario').is_enabled(CITY))

    def test_consistency(self):
        self.assertTrue(is_consistent(AddressSelection('Canada', 'Ontario', 'Toronto')))
        self.assertTrue(is_consistent(AddressSelection('NonexistentCountry')))
        self.assertFalse(is_consistent(AddressSelection('Australia', 'Ontario')))
        self.assertFalse(is_consistent(AddressSelection('Canada', 'Ontario', 'Melbourne')))
        self.assertFalse(is_consistent(AddressSelection('', 'Ontario')))

    def test_cascade_keeps_selection_consistent(self):
        selection = AddressSelection()
        for country in list_countries():
            selection = selection.on_country_change(country)
            self.assertTrue(is_consistent(selection))
            for state in list_states(country):
                selection = selection.on_state_change(state)
                self.assertTrue(is_consistent(selection))
                selection = selection.on_city_change(list_cities(country, state)[0])
                self.assertTrue(is_consistent(selection))


class AddressSerializerTests(SimpleTestCase):

    def test_valid_address(self):
        serializer = AddressSerializer(data={'country': 'Canada', 'state': 'Ontario', 'city': 'Ottawa'})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.to_selection(), AddressSelection('Canada', 'Ontario', 'Ottawa'))

    def test_stale_state_rejected(self):
        serializer = AddressSerializer(data={'country': 'Australia', 'state': 'Ontario'})
        self.assertFalse(serializer.is_valid())
        self.assertIn('state', serializer.errors)

    def test_city_without_state_rejected(self):
        serializer = AddressSerializer(data={'country': 'Canada', 'city': 'Toronto'})
        self.assertFalse(serializer.is_valid())
        self.assertIn('city', serializer.errors)


class LocationAPITests(BaseAPITestCase):
    """Test locations endpoints"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_requires_authentication(self):
        self.client.logout()
        response = self.client.get('/api/v1/locations/countries/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_country_list(self):
        response = self.client.get('/api/v1/locations/countries/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, list_countries())

    def test_state_list_unknown_country(self):
        response = self.client.get('/api/v1/locations/states/', {'country': 'NonexistentCountry'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_city_list(self):
        response = self.client.get('/api/v1/locations/cities/', {'country': 'Canada', 'state': 'Ontario'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, ['Toronto', 'Ottawa', 'Hamilton', 'London', 'Kitchener'])

    def test_resolve_country_change(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'country': 'Canada', 'state': 'Ontario', 'city': 'Toronto',
            'changed': 'country', 'value': 'Australia',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['selection'], {'country': 'Australia', 'state': '', 'city': ''})
        self.assertIn('Victoria', response.data['options']['state'])
        self.assertEqual(response.data['options']['city'], [])
        self.assertEqual(response.data['enabled'], {'country': True, 'state': True, 'city': False})

    def test_resolve_state_change(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'country': 'Canada', 'state': 'Ontario', 'city': 'Toronto',
            'changed': 'state', 'value': 'Ontario',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['selection']['city'], '')
        self.assertTrue(response.data['enabled']['city'])

    def test_resolve_unknown_level(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'changed': 'planet', 'value': 'Mars',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('changed', response.data)

    def test_resolve_rejects_state_of_another_country(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'country': 'Canada', 'changed': 'state', 'value': 'Victoria',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(list(response.data), ['state'])

    def test_resolve_rejects_city_outside_state(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'country': 'Canada', 'state': 'Ontario', 'changed': 'city', 'value': 'Melbourne',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('city', response.data)

    def test_resolve_rejects_unknown_country(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'changed': 'country', 'value': 'Atlantis',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('country', response.data)

    def test_resolve_clearing_a_level_is_allowed(self):
        response = self.client.post('/api/v1/locations/resolve/', {
            'country': 'Canada', 'state': 'Ontario', 'city': 'Toronto', 'changed': 'state', 'value': '',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['selection'], {'country': 'Canada', 'state': '', 'city': ''})
