"""Endpoints de categorias e subcategorias."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.categories import list_categories, list_subcategories
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import CategoryRead, SubcategoryRead

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories", response_model=list[CategoryRead])
def read_categories(db: Session = Depends(get_db)) -> list[CategoryRead]:
    """Lista todas as categorias de eventos."""

    return [CategoryRead.model_validate(item) for item in list_categories(db)]


@router.get("/subcategories", response_model=list[SubcategoryRead])
def read_subcategories(db: Session = Depends(get_db)) -> list[SubcategoryRead]:
    """Lista todas as subcategorias."""

    return [SubcategoryRead.model_validate(item) for item in list_subcategories(db)]


@router.get("/categories/{category_id}/subcategories", response_model=list[SubcategoryRead])
def read_category_subcategories(
    category_id: int, db: Session = Depends(get_db)
) -> list[SubcategoryRead]:
    """Lista as subcategorias de uma categoria."""

    return [
        SubcategoryRead.model_validate(item)
        for item in list_subcategories(db, category_id=category_id)
    ]
