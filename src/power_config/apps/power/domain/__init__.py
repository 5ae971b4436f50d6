# Domain package for power configuration
"""
This package contains the power configuration value object, the units derived
from it, and the message catalogue used to report configuration errors.

The domain layer is independent of Django; feature lookup and message
translation are reached through the interfaces in ``interfaces``.
"""
