# Infrastructure package for power configuration
"""
This package contains the Django-backed implementations of the domain
interfaces: the settings feature source and the translation message resolver.
"""
