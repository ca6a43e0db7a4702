# quimica/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quimica.config import Settings
from quimica.llm import ReactionPredictor
from quimica.outcomes import Outcome
from quimica.schema import MessageResponse

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


MESSAGE_RESPONSES = {
    400: {"model": MessageResponse},
    500: {"model": MessageResponse},
    503: {"model": MessageResponse},
}


def _message(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(message=text).model_dump())


def create_app(settings: Optional[Settings] = None, predictor: Optional[ReactionPredictor] = None) -> FastAPI:
    """Build the API. A predictor passed in replaces the real OpenAI-backed one."""
    settings = settings or (predictor.settings if predictor is not None else Settings.from_env())
    # locale/output_mode inválidos falham aqui, não no meio de um request
    settings.check()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # um único client para o processo inteiro
        if app.state.predictor is None:
            app.state.predictor = ReactionPredictor(settings)
        yield

    app = FastAPI(title="Reações Químicas", lifespan=lifespan)
    app.state.settings = settings
    app.state.predictor = predictor

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.get("/", responses=MESSAGE_RESPONSES)
    def handle(request: Request, q: Optional[str] = None):
        messages = settings.messages
        try:
            log.info('Received formula "%s"', q)

            if not q:
                return _message(400, messages["invalid_formula"])

            prediction = request.app.state.predictor.predict_reaction(q)

            if prediction.outcome == Outcome.REACTION:
                return JSONResponse(status_code=200, content=prediction.result.to_payload())

            if prediction.outcome == Outcome.UNAVAILABLE and settings.separate_unavailable:
                return _message(503, messages["unavailable"])

            return _message(200, messages["no_reaction"])
        except Exception:
            log.exception("Failed to handle formula %r", q)
            return _message(500, messages["internal_error"])

    return app


app = create_app()


def run() -> None:
    settings = app.state.settings
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    log.info("Running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
