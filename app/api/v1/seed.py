from fastapi import APIRouter, Depends

from app.deps import get_seed_service
from app.services.seed_service import SeedService

router = APIRouter()


@router.get("/")
async def execute_seed(service: SeedService = Depends(get_seed_service)):
    return await service.run_seed()
