from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from pantry_recipes.app.core.config import get_settings
from pantry_recipes.app.db.session import get_db
from pantry_recipes.app.services.llm_client import OllamaChatClient


def get_db_session(db: Session = Depends(get_db)) -> Session:
    return db


def get_chat_client() -> OllamaChatClient:
    return OllamaChatClient(get_settings())


def require_admin_secret(
    admin_secret: Optional[str] = Header(default=None, convert_underscores=False, alias="X-Admin-Secret"),
) -> None:
    settings = get_settings()
    if not admin_secret or admin_secret != settings.admin_secret:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin secret")
