"""
Order creation wizard: three sections filled in order, Customer -> Vendor -> Order.

The wizard itself knows nothing about HTTP or the database. Each section is
checked by a validator callable taking the raw submitted values and returning
``(cleaned, errors)``; ``errors`` maps a field name to one message and is empty
on success. The views plug in validators built from DRF serializers and keep
the wizard in the session through ``to_dict``/``from_dict``.

A section joins the completed set only when its validator passes, and the set
is emptied only by ``reset``. Submission hands the combined values to a
handler, and only once all three sections are complete.

An optional ``discard`` hook receives section values that are about to be
dropped (replaced by a re-completion, or cleared by ``reset``) so whatever
they point at, such as stored uploads, can be released.
"""
import logging
from typing import Callable, Dict, Optional, Tuple

logger = logging.getLogger('ipdesk.orders')

CUSTOMER = 'customer'
VENDOR = 'vendor'
ORDER = 'order'
SECTIONS = (CUSTOMER, VENDOR, ORDER)

# Where a successful completion moves the active section
NEXT_SECTION = {CUSTOMER: VENDOR, VENDOR: ORDER, ORDER: ORDER}

SectionValidator = Callable[[dict], Tuple[dict, Dict[str, str]]]


class UnknownSection(ValueError):
    def __init__(self, section):
        super().__init__(f"Unknown form section: {section!r}")
        self.section = section


def check_section(section):
    if section not in SECTIONS:
        raise UnknownSection(section)
    return section


class OrderWizard:
    def __init__(self, validators: Dict[str, SectionValidator], active=CUSTOMER, completed=(),
                 values=None, errors=None, discard: Optional[Callable[[dict], None]] = None):
        missing = [section for section in SECTIONS if section not in validators]
        if missing:
            raise ValueError(f"No validator for sections: {', '.join(missing)}")
        self._validators = validators
        self._discard = discard
        self._active = check_section(active)
        self._completed = {check_section(section) for section in completed}
        self._values = {section: dict((values or {}).get(section) or {}) for section in SECTIONS}
        self._errors = {section: dict((errors or {}).get(section) or {}) for section in SECTIONS}

    @property
    def active(self):
        return self._active

    @property
    def completed(self):
        return frozenset(self._completed)

    def is_completed(self, section):
        return check_section(section) in self._completed

    def values(self, section):
        return dict(self._values[check_section(section)])

    def errors(self, section):
        return dict(self._errors[check_section(section)])

    def select_section(self, section):
        """Make ``section`` the active one; completion state is not touched"""
        self._active = check_section(section)

    def complete_section(self, section, raw) -> Dict[str, str]:
        """
        Validate ``raw`` for ``section``.

        Returns the error map, empty on success. On success the cleaned values
        replace the previous ones (which go to the discard hook), the section is
        marked complete and the next section becomes active. On failure the
        completed set is left exactly as it was.
        """
        check_section(section)
        cleaned, errors = self._validators[section](raw)
        if errors:
            self._errors[section] = dict(errors)
            logger.debug(f"Wizard section '{section}' rejected: {sorted(errors)}")
            return dict(errors)

        self._errors[section] = {}
        self._release(self._values[section])
        self._values[section] = dict(cleaned)
        self._completed.add(section)
        self._active = NEXT_SECTION[section]
        return {}

    def missing_sections(self):
        return [section for section in SECTIONS if section not in self._completed]

    def can_submit(self):
        return not self.missing_sections()

    def payload(self):
        """Cleaned values of all sections merged into one flat mapping"""
        merged = {}
        for section in SECTIONS:
            merged.update(self._values[section])
        return merged

    def submit(self, handler) -> Optional[object]:
        """Call ``handler(payload)`` when every section is complete, else return None"""
        if not self.can_submit():
            logger.info(f"Wizard submit refused, missing sections: {self.missing_sections()}")
            return None
        return handler(self.payload())

    def reset(self, discard=True):
        """
        Close the form. With ``discard`` the stored section values go through
        the discard hook; pass False once they belong to a created order.
        """
        if discard:
            for section in SECTIONS:
                self._release(self._values[section])
        self._active = CUSTOMER
        self._completed = set()
        self._values = {section: {} for section in SECTIONS}
        self._errors = {section: {} for section in SECTIONS}

    def _release(self, values):
        if values and self._discard is not None:
            self._discard(dict(values))

    def to_dict(self):
        return {
            'active': self._active,
            'completed': [section for section in SECTIONS if section in self._completed],
            'values': {section: dict(self._values[section]) for section in SECTIONS},
            'errors': {section: dict(self._errors[section]) for section in SECTIONS},
        }

    @classmethod
    def from_dict(cls, data, validators, discard=None):
        data = data or {}
        return cls(
            validators,
            active=data.get('active', CUSTOMER),
            completed=data.get('completed', ()),
            values=data.get('values'),
            errors=data.get('errors'),
            discard=discard,
        )
