from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import PowerConfigurationViewSet

router = DefaultRouter()
router.register(r'power-configuration', PowerConfigurationViewSet, basename='power-configuration')

urlpatterns = [
    path('', include(router.urls)),
]
