from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pantry_recipes.app.api.deps import get_db_session, require_admin_secret
from pantry_recipes.app.services import seed_service

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin_secret)])


@router.post("/seed")
def seed_demo_data(db: Session = Depends(get_db_session)):
    return seed_service.seed_demo_data(db)
