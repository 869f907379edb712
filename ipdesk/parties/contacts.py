"""
Point-of-contact values stored as serialized JSON text.

Older rows (and rows typed in by hand through the admin) are not always
valid JSON, so reading never fails: anything that is not a JSON object with
contact fields comes back as ``UnparsedContact`` carrying the raw text, and
callers render that as-is.
"""
import json
from dataclasses import dataclass, asdict
from typing import List, Union

CONTACT_FIELDS = ('name', 'email', 'phone', 'country_code', 'area_of_expertise')


@dataclass(frozen=True)
class StructuredContact:
    name: str = ''
    email: str = ''
    phone: str = ''
    country_code: str = ''
    area_of_expertise: str = ''

    kind = 'structured'

    def is_complete(self):
        """Name, email and phone are all filled in"""
        return bool(self.name.strip() and self.email.strip() and self.phone.strip())

    def to_dict(self):
        return asdict(self)

    def to_representation(self):
        return {'kind': self.kind, **self.to_dict()}


@dataclass(frozen=True)
class UnparsedContact:
    raw_text: str

    kind = 'unparsed'

    def is_complete(self):
        return False

    def to_representation(self):
        return {'kind': self.kind, 'raw_text': self.raw_text}


ContactInfo = Union[StructuredContact, UnparsedContact]


def _decode(raw):
    try:
        return json.loads(raw), True
    except (TypeError, ValueError):
        return None, False


def _from_mapping(data) -> StructuredContact:
    values = {}
    for key in CONTACT_FIELDS:
        value = data.get(key)
        if value is None:
            # Payloads from the browser form use camelCase
            camel = key.split('_')[0] + ''.join(part.title() for part in key.split('_')[1:])
            value = data.get(camel, '')
        values[key] = str(value) if value is not None else ''
    return StructuredContact(**values)


def parse_contact_info(raw) -> Union[ContactInfo, None]:
    """Decode a single serialized contact; None when nothing is stored"""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    if isinstance(raw, dict):
        return _from_mapping(raw)
    data, ok = _decode(raw)
    if ok and isinstance(data, dict):
        return _from_mapping(data)
    return UnparsedContact(raw_text=str(raw))


def parse_contact_list(raw) -> List[ContactInfo]:
    """Decode a serialized list of contacts; a lone object is a one-item list"""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return []
    data, ok = (raw, True) if isinstance(raw, (list, dict)) else _decode(raw)
    if not ok:
        return [UnparsedContact(raw_text=str(raw))]
    if isinstance(data, dict):
        return [_from_mapping(data)]
    if isinstance(data, list):
        return [
            _from_mapping(item) if isinstance(item, dict) else UnparsedContact(raw_text=str(item))
            for item in data
        ]
    return [UnparsedContact(raw_text=str(raw))]


def serialize_contact(contact) -> str:
    if contact is None:
        return ''
    if isinstance(contact, UnparsedContact):
        return contact.raw_text
    return json.dumps(contact.to_dict())


def serialize_contact_list(contacts) -> str:
    if not contacts:
        return ''
    return json.dumps([
        contact.to_dict() if isinstance(contact, StructuredContact) else contact.raw_text
        for contact in contacts
    ])
