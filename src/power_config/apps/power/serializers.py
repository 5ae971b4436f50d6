from rest_framework import serializers
from rest_framework.settings import api_settings

from power_config.apps.power.domain.exceptions import InvalidPowerConfiguration, InvalidPowerValue
from power_config.apps.power.domain.models import (
    KEY_UNIQUE_COMPONENTS,
    KEY_UNIT_COMPONENTS,
    KEY_UNITS_REQUIRED,
    PowerConfiguration,
)

# Feature keys reported by the domain mapped to serializer fields
FIELD_FOR_KEY = {
    KEY_UNITS_REQUIRED: 'units_required',
    KEY_UNIT_COMPONENTS: 'components',
    KEY_UNIQUE_COMPONENTS: 'unique_components',
}


class PowerComponentSerializer(serializers.Serializer):
    key = serializers.CharField(read_only=True)
    label = serializers.CharField(read_only=True)
    component_type = serializers.CharField(read_only=True)
    position = serializers.IntegerField(read_only=True)
    is_unique = serializers.BooleanField(read_only=True)


class PowerUnitSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    identifier = serializers.CharField(read_only=True)
    components = PowerComponentSerializer(many=True, read_only=True)


class PowerConfigurationSerializer(serializers.Serializer):
    """Accept raw configuration parameters; render a PowerConfiguration with its units."""

    # Whitespace is kept so the domain can reject padded component names
    units_required = serializers.IntegerField()
    use_alphabetic_names = serializers.BooleanField(default=True)
    components = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False), default=list
    )
    unique_components = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False), default=list
    )

    def validate(self, data):
        """Fail fast with the domain's message, keyed by the offending field."""
        try:
            data['configuration'] = PowerConfiguration(
                data['units_required'],
                data['use_alphabetic_names'],
                data['components'],
                data['unique_components']
            )
        except InvalidPowerConfiguration as exc:
            field = FIELD_FOR_KEY.get(exc.key, api_settings.NON_FIELD_ERRORS_KEY)
            raise serializers.ValidationError({field: exc.message})
        return data

    def to_representation(self, instance):
        return {
            'units_required': instance.units_required,
            'use_alphabetic_names': instance.use_alphabetic_names,
            'components': sorted(instance.components),
            'unique_components': sorted(instance.unique_components),
            'units': PowerUnitSerializer(instance.units, many=True).data,
        }


class PowerValuesSerializer(serializers.Serializer):
    """Asset values keyed by component key, e.g. ``{"PORT_A": "01"}``."""

    values = serializers.DictField(child=serializers.CharField(allow_blank=True))

    def validate_values(self, values):
        config = self.context['configuration']
        try:
            config.units.validate_values(values)
        except InvalidPowerValue as exc:
            raise serializers.ValidationError(exc.message)
        return values
