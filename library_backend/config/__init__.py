"""Configuration package.

Import from ``library_backend.config.settings`` directly where needed so that
importing the package does not read the environment.
"""

__all__: list[str] = []
