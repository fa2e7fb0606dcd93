from docvault.domains.analytics.schemas import UserStatsResponse, DashboardResponse
from docvault.domains.analytics.services import AnalyticsService

__all__ = ["UserStatsResponse", "DashboardResponse", "AnalyticsService"]
