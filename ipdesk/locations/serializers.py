from rest_framework import serializers
from .resolver import AddressSelection, LEVELS, list_cities, list_states


class AddressSerializer(serializers.Serializer):
    """Validate a country/state/city triple against the location table"""
    country = serializers.CharField(max_length=100, allow_blank=True, required=False, default='')
    state = serializers.CharField(max_length=100, allow_blank=True, required=False, default='')
    city = serializers.CharField(max_length=100, allow_blank=True, required=False, default='')

    def validate(self, attrs):
        country = attrs.get('country', '')
        state = attrs.get('state', '')
        city = attrs.get('city', '')
        errors = {}
        if state and state not in list_states(country):
            errors['state'] = f'"{state}" is not a state of "{country}"' if country else 'Select a country first'
        elif city and city not in list_cities(country, state):
            errors['city'] = f'"{city}" is not a city of "{state}"' if state else 'Select a state first'
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def to_selection(self):
        return AddressSelection(**self.validated_data)


class ResolveSerializer(AddressSerializer):
    """A single picker edit applied on top of the current selection"""
    changed = serializers.ChoiceField(choices=LEVELS)
    value = serializers.CharField(max_length=100, allow_blank=True)

    def validate(self, attrs):
        # The current selection may already be stale; the cascade clears it.
        # The new value itself must be one the edited picker offers.
        current = AddressSelection(country=attrs['country'], state=attrs['state'], city=attrs['city'])
        changed, value = attrs['changed'], attrs['value']
        if value and value not in current.options()[changed]:
            raise serializers.ValidationError({changed: f'"{value}" is not a valid {changed} here'})
        attrs['selection'] = current.change(changed, value)
        return attrs

    def to_selection(self):
        return self.validated_data['selection']
