from django.core.signals import setting_changed
from django.dispatch import receiver

from .infrastructure.property_sources import FEATURES_SETTING, clear_property_sources


@receiver(setting_changed)
def invalidate_feature_cache(sender, setting, **kwargs):
    if setting == FEATURES_SETTING:
        clear_property_sources()
