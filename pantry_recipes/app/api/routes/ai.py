import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pantry_recipes.app.api.deps import get_chat_client, get_db_session
from pantry_recipes.app.schemas.ai import GenerateAiRecipesRequest, GenerateAiRecipesResponse, ParseAiRecipesRequest
from pantry_recipes.app.services import ai_recipe_service
from pantry_recipes.app.services.ai_recipe_parser import ParsedRecipe, parse_ai_recipes
from pantry_recipes.app.services.llm_client import LLMConfigurationError, LLMRequestError, OllamaChatClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/recipes", response_model=GenerateAiRecipesResponse)
async def generate_ai_recipes(
    payload: GenerateAiRecipesRequest,
    db: Session = Depends(get_db_session),
    client: OllamaChatClient = Depends(get_chat_client),
):
    try:
        return await ai_recipe_service.generate_recipe_suggestions(db, payload, client)
    except LLMConfigurationError as exc:
        logger.error("AI suggestions unavailable: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    except LLMRequestError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


@router.post("/recipes/parse", response_model=List[ParsedRecipe])
def parse_recipes(payload: ParseAiRecipesRequest):
    return parse_ai_recipes(payload.content)
