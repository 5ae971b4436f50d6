from django.urls import path, include

urlpatterns = [
    path('api/', include('power_config.apps.power.urls')),
]
