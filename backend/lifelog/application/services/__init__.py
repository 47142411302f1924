from .export_service import ExportService
from .query_builder import build_query
from .resource_service import ResourceService
from .stats_service import StatsService, compute_wellness_score
from .user_service import UserService

__all__ = [
    "ExportService",
    "build_query",
    "ResourceService",
    "StatsService",
    "compute_wellness_score",
    "UserService",
]
