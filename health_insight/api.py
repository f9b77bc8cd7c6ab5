import os
from dataclasses import asdict
from fastapi import APIRouter, Depends, Query, Request, HTTPException
from .engine import evaluate
from .errors import GatewayError, StorageUnavailable
from .gateway import AssessmentGateway
from .knowledge import KnowledgeBase
from .schemas import (
    ConditionOut,
    EvaluateRequest,
    EvaluateResponse,
    HistoryResponse,
    SaveRequest,
    SaveResponse,
    SymptomOut,
)
from .summary import DISCLAIMER, render_history, render_insights

router = APIRouter()

HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "10"))


def get_knowledge(request: Request) -> KnowledgeBase:
    return request.app.state.knowledge


def get_gateway(request: Request) -> AssessmentGateway:
    return request.app.state.gateway


def _gateway_error(exc: GatewayError) -> HTTPException:
    if isinstance(exc, StorageUnavailable):
        return HTTPException(503, detail=f"Database is not connected: {exc}")
    return HTTPException(500, detail=str(exc))


def _validate_symptoms(symptoms, kb: KnowledgeBase):
    if not symptoms:
        raise HTTPException(422, detail="Please select at least one symptom.")
    known = set(kb.list_symptoms())
    unknown = [s for s in symptoms if s not in known]
    if unknown:
        raise HTTPException(422, detail=f"Unknown symptom(s): {', '.join(unknown)}")


@router.get("/v1/disclaimer")
async def disclaimer():
    return {"text": DISCLAIMER}


@router.get("/v1/symptoms", response_model=list[SymptomOut])
async def list_symptoms(kb: KnowledgeBase = Depends(get_knowledge)):
    return [{"name": s, "urgent": kb.is_urgent(s)} for s in kb.list_symptoms()]


@router.get("/v1/conditions", response_model=list[ConditionOut])
async def list_conditions(kb: KnowledgeBase = Depends(get_knowledge)):
    return [{"name": c, "advice": kb.advice_for(c)} for c in kb.conditions()]


@router.post("/v1/evaluate", response_model=EvaluateResponse)
async def evaluate_symptoms(req: EvaluateRequest, kb: KnowledgeBase = Depends(get_knowledge)):
    _validate_symptoms(req.symptoms, kb)
    result = evaluate(req.symptoms, req.age, req.sex, knowledge=kb)
    return {
        "suggestions": [asdict(s) for s in result.suggestions],
        "urgent": result.urgent,
        "urgent_reasons": list(result.urgent_reasons),
        "report": render_insights(result, req.symptoms, kb, name=req.name, age=req.age, notes=req.notes),
    }


@router.post("/v1/assessments", response_model=SaveResponse, status_code=201)
def save_assessment(
    req: SaveRequest,
    kb: KnowledgeBase = Depends(get_knowledge),
    gateway: AssessmentGateway = Depends(get_gateway),
):
    name = req.name.strip()
    if not name:
        raise HTTPException(422, detail="Please enter a name before saving.")
    _validate_symptoms(req.symptoms, kb)

    result = evaluate(req.symptoms, req.age, req.sex, knowledge=kb)
    try:
        user_id, assessment_id = gateway.save_evaluation(
            name, req.age, req.sex, req.symptoms, result, kb, notes=req.notes
        )
    except GatewayError as exc:
        raise _gateway_error(exc) from exc

    return {
        "user_id": user_id,
        "assessment_id": assessment_id,
        "suggestions": [asdict(s) for s in result.suggestions],
        "urgent": result.urgent,
        "urgent_reasons": list(result.urgent_reasons),
        "report": render_insights(result, req.symptoms, kb, name=name, age=req.age, notes=req.notes),
    }


@router.get("/v1/users/{name}/assessments", response_model=HistoryResponse)
def user_history(
    name: str,
    limit: int | None = Query(None, ge=1, le=100),
    gateway: AssessmentGateway = Depends(get_gateway),
):
    name = name.strip()
    if not name:
        raise HTTPException(422, detail="Enter a name to view that user's history.")

    try:
        user_id = gateway.find_user_id_by_name(name)
        if user_id is None:
            raise HTTPException(404, detail=f"No records found for: {name}")
        records = gateway.fetch_recent_assessments(user_id, limit or HISTORY_LIMIT)
    except GatewayError as exc:
        raise _gateway_error(exc) from exc

    if not records:
        raise HTTPException(404, detail=f"No records found for: {name}")
    return {
        "name": name,
        "user_id": user_id,
        "records": records,
        "report": render_history(name, records),
    }
