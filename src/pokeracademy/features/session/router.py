from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, model_validator

from ...core.models import Action, DrawCategory, HandCategory, Mode
from ...core.scoring import Answer
from .schemas import AnswerResult, SpotResponse, SummaryPayload
from .service import SessionConfig, SessionManager

__all__ = ["AnswerRequest", "CreateSessionRequest", "ModeRequest", "create_session_router"]

# Accept the display names the UI shows as well as the short codes.
_MODE_ALIASES = {
    "hand recognition": Mode.HAND_RECOGNITION,
    "outs practice": Mode.OUTS_PRACTICE,
    "decision lab": Mode.DECISION_LAB,
}


def _coerce_mode(value: object) -> object:
    if isinstance(value, Mode) or not isinstance(value, str):
        return value
    key = value.strip().lower()
    if not key:
        return None
    if key in _MODE_ALIASES:
        return _MODE_ALIASES[key]
    try:
        return Mode(key)
    except ValueError:
        return key


class CreateSessionRequest(BaseModel):
    mode: Mode | None = None
    seed: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: dict[str, object]) -> dict[str, object]:
        if not isinstance(data, dict):
            return data
        cleaned: dict[str, object] = dict(data)
        mode = _coerce_mode(cleaned.get("mode"))
        if not isinstance(mode, Mode):
            mode = None
        cleaned["mode"] = mode
        seed = cleaned.get("seed")
        if seed in (None, ""):
            cleaned["seed"] = None
        elif isinstance(seed, str):
            try:
                cleaned["seed"] = int(seed)
            except ValueError:
                cleaned["seed"] = None
        return cleaned

    @model_validator(mode="after")
    def _normalize(self) -> CreateSessionRequest:
        if self.mode is None:
            self.mode = Mode.DECISION_LAB
        return self


class ModeRequest(BaseModel):
    mode: Mode

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: dict[str, object]) -> dict[str, object]:
        if isinstance(data, dict) and "mode" in data:
            return {**data, "mode": _coerce_mode(data["mode"])}
        return data


class AnswerRequest(BaseModel):
    best_hand: HandCategory | None = None
    draw: DrawCategory | None = None
    outs: int | None = None
    pot_odds: float | None = None
    decision: Action | None = None

    def to_answer(self) -> Answer:
        return Answer(
            best_hand=self.best_hand,
            draw=self.draw,
            outs=self.outs,
            pot_odds=self.pot_odds,
            decision=self.decision,
        )


def _json_response(data: dict[str, object]) -> JSONResponse:
    return JSONResponse(data)


class _SessionController:
    def __init__(self, manager: SessionManager) -> None:
        self.manager = manager

    async def create(self, body: CreateSessionRequest) -> dict[str, str]:
        session_id = await self.manager.create_session_async(SessionConfig(mode=body.mode, seed=body.seed))
        return {"session": session_id}

    async def spot(self, sid: str) -> SpotResponse:
        try:
            return await self.manager.get_spot_async(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc

    async def answer(self, sid: str, body: AnswerRequest) -> AnswerResult:
        try:
            return await self.manager.answer_async(sid, body.to_answer())
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc

    async def next_spot(self, sid: str) -> SpotResponse:
        try:
            return await self.manager.next_spot_async(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc

    async def switch_mode(self, sid: str, body: ModeRequest) -> SpotResponse:
        try:
            return await self.manager.switch_mode_async(sid, body.mode)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc

    async def summary(self, sid: str) -> SummaryPayload:
        try:
            return await self.manager.summary_async(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc

    async def end(self, sid: str) -> SummaryPayload:
        try:
            return await self.manager.end_session_async(sid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc


def create_session_router(manager: SessionManager) -> APIRouter:
    controller = _SessionController(manager)
    router = APIRouter(prefix="/api/v1/session", tags=["session"])

    @router.post("")
    async def create_session(body: CreateSessionRequest) -> Response:
        return _json_response(await controller.create(body))

    @router.get("/{sid}/spot")
    async def get_spot(sid: str) -> Response:
        return _json_response((await controller.spot(sid)).to_dict())

    @router.post("/{sid}/answer")
    async def post_answer(sid: str, body: AnswerRequest) -> Response:
        return _json_response((await controller.answer(sid, body)).to_dict())

    @router.post("/{sid}/next")
    async def post_next(sid: str) -> Response:
        return _json_response((await controller.next_spot(sid)).to_dict())

    @router.post("/{sid}/mode")
    async def post_mode(sid: str, body: ModeRequest) -> Response:
        return _json_response((await controller.switch_mode(sid, body)).to_dict())

    @router.get("/{sid}/summary")
    async def get_summary(sid: str) -> Response:
        return _json_response((await controller.summary(sid)).to_dict())

    @router.delete("/{sid}")
    async def delete_session(sid: str) -> Response:
        return _json_response((await controller.end(sid)).to_dict())

    return router
