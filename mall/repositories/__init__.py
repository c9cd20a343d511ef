"""
Persistence adapters.

Every adapter exposes the same ``load``/``save``/``locked`` trio over one
document holding the ``shops`` and ``employees`` collections. Services depend
on that interface and never touch the JSON file directly.
"""
