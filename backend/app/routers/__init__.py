# Routers package: Thin Controllers (SRP / DIP)
from app.routers import (
    dashboard,
    inventory,
    master_data,
    production,
    purchase_orders,
    quality,
    schedule,
    team_settings,
)

__all__ = [
    "dashboard",
    "inventory",
    "master_data",
    "production",
    "purchase_orders",
    "quality",
    "schedule",
    "team_settings",
]
