"""
FastAPI routers grouped by resource (shops, employees, health).

Each module exposes an ``APIRouter`` included by ``mall.app.create_app``.
Services are looked up on ``request.app.state`` so every app instance can run
against its own store.
"""
