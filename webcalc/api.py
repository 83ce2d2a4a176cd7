# api.py
"""
HTTP front end for the calculator.

Serves one shared calculator session, the same contract the browser page used:
post an infix line, get back ``{"state", "equation", "value"}``. The session is
shared by every request, so calls that touch it are serialised with a lock.
"""

import logging
import threading
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import Depends, FastAPI
from pydantic import BaseModel, field_validator

from webcalc import config
from webcalc.infix_to_prefix import infix_to_prefix
from webcalc.prefix_to_infix import prefix_to_infix
from webcalc.session import CalcResult, Calculator

logger = logging.getLogger(__name__)

# ----- Pydantic Models -----

class ExpressionRequest(BaseModel):
    """A single line of calculator input."""
    expression: str

    @field_validator('expression')
    @classmethod
    def expression_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Expression cannot be empty')
        return v.strip()


class TranslationResponse(BaseModel):
    result: str


class VariablesResponse(BaseModel):
    variables: Dict[str, float]


class ResetResponse(BaseModel):
    status: str


# ----- Session -----

class SharedCalculator:
    """A Calculator plus the lock that makes it the single writer."""

    def __init__(self):
        self.calculator = Calculator()
        self.lock = threading.Lock()

    def calc(self, expression: str) -> CalcResult:
        with self.lock:
            return self.calculator.calc(expression)

    def variables(self) -> Dict[str, float]:
        with self.lock:
            return self.calculator.variables

    def reset(self) -> None:
        with self.lock:
            self.calculator.reset()


shared_calculator = SharedCalculator()


def get_calculator() -> SharedCalculator:
    """
    Dependency for the calculator session.
    Tests override this to get a fresh session.
    """
    return shared_calculator


# ----- Application Lifecycle -----

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Calculator API starting up")
    yield
    logger.info("Calculator API shutting down")


app = FastAPI(
    title="Calculator API",
    description="Infix/prefix translation and evaluation with session variables",
    version="1.0.0",
    lifespan=lifespan,
)


# ----- API Routes -----

@app.post("/calc", response_model=CalcResult, summary="Evaluate an infix line")
def calc(request: ExpressionRequest, session: SharedCalculator = Depends(get_calculator)):
    """
    Make the expression the current equation, or bind a variable with
    ``name = number``, and return the current equation's value.
    Errors are reported in the body with ``state = "error"``.
    """
    logger.info(f"Processing calc request: {request.expression!r}")
    result = session.calc(request.expression)
    if not result.ok:
        logger.warning(f"Calc request failed: {result.value}")
    return result


@app.get("/variables", response_model=VariablesResponse, summary="List bound variables")
def list_variables(session: SharedCalculator = Depends(get_calculator)):
    return VariablesResponse(variables=session.variables())


@app.delete("/variables", response_model=ResetResponse, summary="Reset the session")
def reset_session(session: SharedCalculator = Depends(get_calculator)):
    session.reset()
    logger.info("Calculator session reset")
    return ResetResponse(status="reset")


@app.post("/translate/prefix", response_model=TranslationResponse, summary="Infix to prefix")
def translate_to_prefix(request: ExpressionRequest):
    return TranslationResponse(result=infix_to_prefix(request.expression))


@app.post("/translate/infix", response_model=TranslationResponse, summary="Prefix to infix")
def translate_to_infix(request: ExpressionRequest):
    return TranslationResponse(result=prefix_to_infix(request.expression))


# ----- Main Entry Point -----

def run() -> None:
    import uvicorn

    config.configure_logging()
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
