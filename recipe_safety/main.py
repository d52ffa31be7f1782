from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
import time
import uuid
from recipe_safety.models import (
    AlternativesResponse,
    SafetyVerdict,
    SearchConstraintResult,
    ValidateRecipeRequest,
    ValidateSearchRequest,
)
from recipe_safety.services.alternatives import get_safe_alternatives
from recipe_safety.services.safety_validator import validate_recipe_safety
from recipe_safety.services.search_constraints import validate_search_constraints
from recipe_safety.core.logging_config import get_logger

app = FastAPI(title="Recipe Safety Validation API", version="0.1.0")
logger = get_logger(__name__)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000.0
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{duration_ms:.1f}ms request_id={request_id}"
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(ValueError)
async def invalid_recipe_handler(request: Request, exc: ValueError):
    logger.error(f"Rejected recipe: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "error_code": "INVALID_RECIPE",
            "message": str(exc)
        }
    )


@app.get("/")
def read_root():
    return {"message": "Recipe Safety Validation API. Visit /docs for documentation."}


@app.post("/api/validate-recipe", response_model=SafetyVerdict)
async def validate_recipe(request: ValidateRecipeRequest):
    """
    Check a recipe's ingredients against a user's dietary and medical profile.
    """
    return validate_recipe_safety(request.recipe, request.preferences)


@app.post("/api/validate-search", response_model=SearchConstraintResult)
async def validate_search(request: ValidateSearchRequest):
    """
    Detect embrace-list foods that conflict with the user's restrictions.
    """
    return validate_search_constraints(request.preferences)


@app.get("/api/alternatives", response_model=AlternativesResponse)
async def alternatives(ingredient: str = Query(..., min_length=1)):
    return AlternativesResponse(ingredient=ingredient, alternatives=get_safe_alternatives(ingredient))
