from datetime import datetime
from typing import Iterable, List, Optional

from . import data
from .engine import EvaluationResult
from .knowledge import KnowledgeBase


DISCLAIMER = (
    "Important: Educational Use Only\n\n"
    "This tool provides general health information based on user-entered symptoms.\n"
    "It is NOT a medical diagnosis or a substitute for professional advice.\n"
    "Seek urgent care for severe or rapidly worsening symptoms.\n\n"
    "By continuing, you acknowledge and understand the above."
)

URGENT_WARNING = (
    "! URGENT WARNING !\n"
    "Some symptoms may need urgent evaluation. If you have severe chest pain, trouble breathing, confusion,\n"
    "or symptoms are rapidly worsening, seek emergency care now.\n"
)


def ordered_symptoms(selected: Iterable[str], knowledge: KnowledgeBase) -> List[str]:
    """Selected names in checklist order; names outside the checklist go last, sorted."""
    known, unknown = [], []
    for s in set(selected):
        idx = knowledge.display_index(s)
        if idx is None:
            unknown.append(s)
        else:
            known.append((idx, s))
    return [s for _, s in sorted(known)] + sorted(unknown)


def symptoms_csv(selected: Iterable[str], knowledge: KnowledgeBase) -> str:
    return ", ".join(ordered_symptoms(selected, knowledge))


def top_conditions_summary(result: EvaluationResult) -> str:
    return "; ".join(f"{s.condition} (score {s.score})" for s in result.suggestions)


def advice_summary(result: EvaluationResult) -> str:
    distinct = dict.fromkeys(s.advice for s in result.suggestions)
    return " | ".join(distinct)


def render_insights(
    result: EvaluationResult,
    selected: Iterable[str],
    knowledge: KnowledgeBase,
    name: Optional[str] = None,
    age: int = 0,
    notes: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    name = (name or "").strip()
    lines = [f"Hello{' ' + name if name else ''}, here are your personalized insights:", ""]

    if result.urgent:
        lines.append(URGENT_WARNING)

    lines.append("Most likely possibilities (not a diagnosis):")
    for rank, s in enumerate(result.suggestions, start=1):
        lines.append(f"  {rank}) {s.condition} (score {s.score})")
        lines.append(f"     Tip: {s.advice}")

    lines.append("")
    lines.append("General tips:")
    lines.append("  • Stay hydrated and rest.")
    lines.append("  • If symptoms persist, worsen, or you’re concerned, consult a qualified healthcare professional.")
    if age >= data.SENIOR_AGE:
        lines.append("  • Adults 65+ should consider earlier medical advice.")

    lines.append("")
    lines.append(f"Selected symptoms: {symptoms_csv(selected, knowledge)}")
    if notes and notes.strip():
        lines.append(f"Notes: {notes.strip()}")
    lines.append("")
    lines.append(f"Generated: {(generated_at or datetime.now()).isoformat()}")
    return "\n".join(lines)


def render_history(name: str, records) -> str:
    lines = [f"Recent assessments for {name}:", ""]
    for i, r in enumerate(records, start=1):
        lines.append(f"{i}) {r.created_at}")
        lines.append(f"   Symptoms: {r.symptoms}")
        lines.append(f"   Top: {r.top_conditions}")
        if r.urgent:
            lines.append("   Flag: URGENT")
        if r.notes and r.notes.strip():
            lines.append(f"   Notes: {r.notes}")
        lines.append("")
    return "\n".join(lines)
