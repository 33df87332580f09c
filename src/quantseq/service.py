"""Optional FastAPI service exposing quantile computation as HTTP endpoints.

Install with `pip install quantseq[server]` to enable.
This keeps the core library dependency-light.
"""
from __future__ import annotations

from typing import Any, List, Optional, Union

try:  # pragma: no cover - optional dependency
    from fastapi import FastAPI, HTTPException
    from pydantic import BaseModel
except Exception as exc:  # noqa: BLE001
    raise RuntimeError(
        "FastAPI not installed. Install with `pip install quantseq[server]` to use the service."  # noqa: E501
    ) from exc

from . import __version__
from .errors import QuantileError
from .logutil import get_logger
from .quantile import quantile_seq, quantiles


class QuantileRequest(BaseModel):
    data: List[Any]
    prob: Optional[Union[float, List[float]]] = None
    count: Optional[int] = None  # evenly spaced quantiles; count=1 is the median
    sorted: bool = False
    axis: Optional[int] = None


class QuantileResponse(BaseModel):
    result: Any


def build_app() -> FastAPI:
    app = FastAPI(title="quantseq Service", version=__version__)
    log = get_logger("service")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    @app.post("/quantile", response_model=QuantileResponse)
    def quantile(req: QuantileRequest) -> QuantileResponse:
        if (req.prob is None) == (req.count is None):
            raise HTTPException(status_code=422, detail="Provide exactly one of 'prob' or 'count'")
        try:
            if req.count is not None:
                result = quantiles(req.data, req.count, req.sorted, axis=req.axis)
            else:
                result = quantile_seq(req.data, req.prob, is_sorted=req.sorted, axis=req.axis)
        except (QuantileError, TypeError) as exc:
            # Mixed or non-numeric payloads fail inside comparisons with a plain TypeError
            log.warning("rejected quantile request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return QuantileResponse(result=result)

    return app


__all__ = ["build_app", "QuantileRequest", "QuantileResponse"]
