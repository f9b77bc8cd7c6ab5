from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class EvaluateRequest(BaseModel):
    symptoms: List[str] = Field(default_factory=list)
    age: int = Field(default=30, ge=0, le=120)
    sex: str = "Prefer not to say"
    name: Optional[str] = None
    notes: Optional[str] = None


class SaveRequest(EvaluateRequest):
    name: str


class Suggestion(BaseModel):
    condition: str
    score: int
    advice: str


class EvaluateResponse(BaseModel):
    suggestions: List[Suggestion]
    urgent: bool
    urgent_reasons: List[str]
    report: str


class SaveResponse(EvaluateResponse):
    user_id: int
    assessment_id: int


class SymptomOut(BaseModel):
    name: str
    urgent: bool


class ConditionOut(BaseModel):
    name: str
    advice: str


class AssessmentRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    symptoms: Optional[str] = None
    top_conditions: Optional[str] = None
    advice: Optional[str] = None
    urgent: bool
    notes: Optional[str] = None
    created_at: datetime


class HistoryResponse(BaseModel):
    name: str
    user_id: int
    records: List[AssessmentRecord]
    report: str
