"""FastAPI endpoints for the Catalogue: categories and merchandise."""

from fastapi import APIRouter, Depends

from catalogue.api.schemas import CategoryResponse, MerchandiseResponse
from catalogue.repository import CatalogueRepository
from shared.db import get_engine
from shared.errors import ValidationError

router = APIRouter(prefix="/api", tags=["catalogue"])


def get_catalogue_repository() -> CatalogueRepository:
    return CatalogueRepository(get_engine())


@router.get("/categorias", response_model=list[CategoryResponse])
async def list_categories(repo: CatalogueRepository = Depends(get_catalogue_repository)):
    return await repo.visible_categories()


@router.get("/buscar-categorias", response_model=list[CategoryResponse])
async def search_categories(palabra: str = "", repo: CatalogueRepository = Depends(get_catalogue_repository)):
    if not palabra.strip():
        raise ValidationError("Falta palabra clave")
    return await repo.search_categories(palabra)


@router.get("/mercaderia", response_model=list[MerchandiseResponse])
async def list_merchandise(
    buscar: str | None = None,
    grcat: str | None = None,
    repo: CatalogueRepository = Depends(get_catalogue_repository),
):
    return await repo.merchandise(buscar, grcat)
