from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .models.inputs import FinancialInputs
from .sample_data import default_inputs
from .schemas import (
    CalculationResponse,
    FormulasResponse,
    ProjectionRequest,
    ProjectionResponse,
    RequiredGrowthRequest,
    RequiredGrowthResponse,
)
from .services.calculator import MetricsCalculator, classify_profit
from .services.formulas import get_calculation_formulas
from .services.growth import ProjectedRevenueEvaluator, RequiredGrowthRateSolver


logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version="0.1.0", debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = MetricsCalculator()
solver = RequiredGrowthRateSolver()
evaluator = ProjectedRevenueEvaluator()


@app.post("/calculate", response_model=CalculationResponse)
def calculate(payload: FinancialInputs) -> CalculationResponse:
    result = calculator.compute(payload)
    return CalculationResponse(result=result, profit_status=classify_profit(result.net_profit))


@app.get("/formulas", response_model=FormulasResponse)
def formulas() -> FormulasResponse:
    return FormulasResponse(formulas=get_calculation_formulas())


@app.get("/defaults", response_model=FinancialInputs)
def defaults() -> FinancialInputs:
    return default_inputs()


@app.post("/growth/required-rate", response_model=RequiredGrowthResponse)
def required_growth_rate(payload: RequiredGrowthRequest) -> RequiredGrowthResponse:
    rate = solver.solve(payload.current_revenue, payload.target_revenue, payload.months)
    return RequiredGrowthResponse(growth_rate=rate)


@app.post("/growth/projection", response_model=ProjectionResponse)
def projected_revenue(payload: ProjectionRequest) -> ProjectionResponse:
    revenue = evaluator.project(payload.current_revenue, payload.growth_rate, payload.months)
    return ProjectionResponse(projected_revenue=revenue)


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": "An unexpected error occurred"},
    )
