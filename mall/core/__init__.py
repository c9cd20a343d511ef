"""
Core utilities shared across the mall API.

Configuration lives in ``config``; id and timestamp helpers in ``utils``.
Services and routers should read settings through ``get_settings()`` instead
of touching ``os.environ`` directly.
"""
