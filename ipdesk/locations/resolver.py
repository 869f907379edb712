"""
Cascading country -> state -> city resolution over the static location table.

Every lookup is tolerant: an unset or unknown country/state yields an empty
option list instead of raising, so a missing geography entry never breaks a
form. Edits go through ``on_*_change`` which clear dependent levels.
"""
from dataclasses import asdict, dataclass, replace
from typing import List

from .data import LOCATION_TABLE

COUNTRY = 'country'
STATE = 'state'
CITY = 'city'
LEVELS = (COUNTRY, STATE, CITY)


def list_countries(table=LOCATION_TABLE) -> List[str]:
    return list(table.keys())


def list_states(country: str, table=LOCATION_TABLE) -> List[str]:
    """State names for ``country`` in table order, or [] when unset/unknown"""
    if not country:
        return []
    states = table.get(country)
    if not states:
        return []
    return list(states.keys())


def list_cities(country: str, state: str, table=LOCATION_TABLE) -> List[str]:
    """City names for ``country``/``state``, or [] when either key is missing"""
    if not country or not state:
        return []
    states = table.get(country)
    if not states:
        return []
    return list(states.get(state, ()))


@dataclass(frozen=True)
class AddressSelection:
    """Current picker values; '' means unselected at that level"""
    country: str = ''
    state: str = ''
    city: str = ''

    def on_country_change(self, new_country: str) -> 'AddressSelection':
        # Re-selecting the same country still clears state and city
        return AddressSelection(country=new_country or '', state='', city='')

    def on_state_change(self, new_state: str) -> 'AddressSelection':
        return replace(self, state=new_state or '', city='')

    def on_city_change(self, new_city: str) -> 'AddressSelection':
        return replace(self, city=new_city or '')

    def change(self, level: str, value: str) -> 'AddressSelection':
        """Dispatch a single field edit to the matching cascade rule"""
        if level == COUNTRY:
            return self.on_country_change(value)
        if level == STATE:
            return self.on_state_change(value)
        if level == CITY:
            return self.on_city_change(value)
        raise ValueError(f"Unknown location level: {level}")

    def is_enabled(self, level: str) -> bool:
        """Whether the picker for ``level`` accepts input yet"""
        if level == COUNTRY:
            return True
        if level == STATE:
            return bool(self.country)
        if level == CITY:
            return bool(self.state)
        raise ValueError(f"Unknown location level: {level}")

    def options(self, table=LOCATION_TABLE) -> dict:
        return {
            COUNTRY: list_countries(table),
            STATE: list_states(self.country, table),
            CITY: list_cities(self.country, self.state, table),
        }

    def as_dict(self) -> dict:
        return asdict(self)


def is_consistent(selection: AddressSelection, table=LOCATION_TABLE) -> bool:
    """
    True when every non-empty level is a valid child of the level above.

    A state without a country, or a city without a state, is inconsistent.
    """
    if selection.state and selection.state not in list_states(selection.country, table):
        return False
    if selection.city and selection.city not in list_cities(selection.country, selection.state, table):
        return False
    return True
