import argparse
import logging

import uvicorn
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from binary_search import REFERENCE_SEQUENCE, InvalidRange, contains, is_sorted, search_steps
from sequence import generate_sorted_array
from settings import MAX_ARRAY_SIZE, MIN_ARRAY_SIZE, load_settings

logger = logging.getLogger(__name__)

settings = load_settings()

app = FastAPI(title="bin-search")


class SearchRequest(BaseModel):
    target: int = Field(..., description="Value to look for (required)")
    values: Optional[List[int]] = Field(None, description="Ascending sequence; reference sequence if omitted")
    low: Optional[int] = Field(None, description="Inclusive lower index, defaults to 0")
    high: Optional[int] = Field(None, description="Inclusive upper index, defaults to len(values) - 1")
    variant: Literal["recursive", "iterative"] = Field(settings.variant)
    trace: bool = Field(False, description="Include every probe in the response")


class SearchStep(BaseModel):
    low: int
    high: int
    mid: int
    value: Optional[int]
    direction: str  # "left" | "right" | "found" | "miss"
    depth: int


class SearchResponse(BaseModel):
    found: bool
    message: str  # "Found!" | "Not found!"
    steps: List[SearchStep]


class SequenceResponse(BaseModel):
    values: List[int]
    seed: int


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/search", response_model=SearchResponse)
async def search(req: SearchRequest) -> JSONResponse:
    values = list(REFERENCE_SEQUENCE) if req.values is None else req.values
    if not is_sorted(values):
        raise HTTPException(status_code=400, detail="values must be sorted ascending")

    try:
        found = contains(values, req.target, req.low, req.high, variant=req.variant)
        steps = []
        if req.trace:
            low = 0 if req.low is None else req.low
            steps = search_steps(values, req.target, variant=req.variant, low=low, high=req.high)
    except InvalidRange as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("search target=%d size=%d variant=%s found=%s", req.target, len(values), req.variant, found)
    return JSONResponse({
        "found": found,
        "message": "Found!" if found else "Not found!",
        "steps": steps,
    })


@app.get("/sequence", response_model=SequenceResponse)
async def sequence(
        size: int = Query(settings.array_size, ge=MIN_ARRAY_SIZE, le=MAX_ARRAY_SIZE),
        min_value: int = settings.min_value,
        max_value: int = settings.max_value,
        seed: int = settings.seed,
) -> JSONResponse:
    try:
        values = generate_sorted_array(size, min_value, max_value, seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return JSONResponse({"values": values, "seed": seed})


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8005)
    parser.add_argument("--log_level", type=str, default=settings.log_level)
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
