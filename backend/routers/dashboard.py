from fastapi import APIRouter, Depends

from dependencies import get_catalog, get_progress_store
from schemas.dashboard import DashboardStats
from services.catalog import Catalog
from services.dashboard import build_dashboard
from services.progress import ProgressStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def get_dashboard(
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
):
    return build_dashboard(catalog, store)
