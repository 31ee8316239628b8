"""
FastAPI routers grouped by domain (places, location helpers).

Each module exposes an APIRouter that is included by the app factory. Services
are looked up on ``app.state`` so tests can swap them.
"""
