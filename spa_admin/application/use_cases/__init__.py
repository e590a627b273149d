from .dashboard import BuildDashboardUseCase, DashboardView, build_dashboard
from .seeding import create_store

__all__ = [
    "BuildDashboardUseCase",
    "DashboardView",
    "build_dashboard",
    "create_store",
]
