"""DRF ViewSet for reading and checking the power configuration."""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .application.services import get_power_configuration_service
from .serializers import PowerConfigurationSerializer, PowerValuesSerializer


class PowerConfigurationViewSet(viewsets.ViewSet):
    """
    Endpoints:
      • GET  /power-configuration/            (default configuration with units)
      • POST /power-configuration/validate/   (check a candidate configuration)
      • POST /power-configuration/values/     (check asset values against the default)
    """

    def list(self, request):
        config = get_power_configuration_service().default_configuration()
        return Response(PowerConfigurationSerializer(config).data)

    @action(detail=False, methods=["post"])
    def validate(self, request):
        ser = PowerConfigurationSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        config = ser.validated_data['configuration']
        return Response(PowerConfigurationSerializer(config).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["post"])
    def values(self, request):
        config = get_power_configuration_service().default_configuration()
        ser = PowerValuesSerializer(data=request.data, context={'configuration': config})
        ser.is_valid(raise_exception=True)
        return Response({'valid': True})
