from docvault.domains.activity.entities import ActivityAction, RecentActivity
from docvault.domains.activity.schemas import RecentActivityResponse
from docvault.domains.activity.services import ActivityService

__all__ = ["ActivityAction", "RecentActivity", "RecentActivityResponse", "ActivityService"]
