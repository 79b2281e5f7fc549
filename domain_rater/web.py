from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import BaseModel

from domain_rater.analyzers.domain_analyzer import analyze_domain
from domain_rater.config import init_config
from domain_rater.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = init_config()
    configure_logging(log_json=settings.log_json, level=settings.log_level)
    yield


app = FastAPI(title="Domain Rater API", version="1.0.0", lifespan=lifespan)


class BatchRequest(BaseModel):
    targets: List[str]


# ----------------------------------------------------
# Rating Routes
# ----------------------------------------------------

@app.get("/api/v1/rate")
def rate_query(target: str = Query(..., description="Domain or URL")):
    try:
        return analyze_domain(target)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/rate/{target:path}")
def rate_path(target: str, request: Request):
    """
    Rate a domain given in the path, query string included:
    - /api/v1/rate/example.com
    - /api/v1/rate/shop.example.com/cart?item=42
    """
    if request.url.query:
        target = f"{target}?{request.url.query}"
    try:
        return analyze_domain(target)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/v1/rate/batch")
def rate_batch(request: BatchRequest):
    try:
        return [analyze_domain(target) for target in request.targets]
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
