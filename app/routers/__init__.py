# app/routers/__init__.py

from app.routers import health
from app.routers import verification
from app.routers import invoices

__all__ = ["health", "verification", "invoices"]
