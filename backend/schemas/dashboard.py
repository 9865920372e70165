from pydantic import BaseModel


class DashboardStats(BaseModel):
    total: int
    learning: int
    mastered: int
    percent: int
