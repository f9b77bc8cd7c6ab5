from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from . import data
from .knowledge import KnowledgeBase, load_default


# score(condition) = sum(weight for selected symptom) + 1 if age >= 65 and condition is bumped


@dataclass(frozen=True)
class ConditionSuggestion:
    condition: str
    score: int
    advice: str


@dataclass(frozen=True)
class EvaluationResult:
    suggestions: Tuple[ConditionSuggestion, ...]
    urgent: bool
    urgent_reasons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class UrgentRule:
    name: str
    check: Callable[[FrozenSet[str], int, KnowledgeBase], bool]


def _any_urgent_symptom(selected: FrozenSet[str], age: int, kb: KnowledgeBase) -> bool:
    return any(kb.is_urgent(s) for s in selected)


def _chest_pain_with_breathlessness(selected: FrozenSet[str], age: int, kb: KnowledgeBase) -> bool:
    return data.CHEST_PAIN in selected and data.SHORTNESS_OF_BREATH in selected


def _high_fever_in_young_child(selected: FrozenSet[str], age: int, kb: KnowledgeBase) -> bool:
    return data.HIGH_FEVER in selected and age <= data.YOUNG_CHILD_MAX_AGE


URGENT_RULES: Tuple[UrgentRule, ...] = (
    UrgentRule("urgent-symptom", _any_urgent_symptom),
    UrgentRule("chest-pain-with-breathlessness", _chest_pain_with_breathlessness),
    UrgentRule("high-fever-in-young-child", _high_fever_in_young_child),
)

DEFAULT_KNOWLEDGE = load_default()


def score(selected: Iterable[str], age: int, knowledge: KnowledgeBase) -> Dict[str, int]:
    scores: Dict[str, int] = {}
    for symptom in selected:
        for condition, weight in knowledge.weights_for(symptom).items():
            scores[condition] = scores.get(condition, 0) + weight
    if age >= data.SENIOR_AGE:
        for condition in data.SENIOR_BUMPED_CONDITIONS:
            scores[condition] = scores.get(condition, 0) + 1
    return scores


def rank(scores: Dict[str, int], top_n: int = data.TOP_N) -> List[Tuple[str, int]]:
    # highest score first, equal scores by condition name
    ordered = sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))
    return ordered[:top_n]


def urgent_reasons(
    selected: FrozenSet[str],
    age: int,
    knowledge: KnowledgeBase,
    rules: Iterable[UrgentRule] = URGENT_RULES,
) -> Tuple[str, ...]:
    return tuple(r.name for r in rules if r.check(selected, age, knowledge))


def evaluate(
    selected_symptoms: Iterable[str],
    age: int,
    sex: Optional[str] = None,
    knowledge: Optional[KnowledgeBase] = None,
) -> EvaluationResult:
    """Rank the top conditions for the selected symptoms and derive the urgent flag.

    ``sex`` is accepted for the assessment record but does not change scores.
    """
    kb = knowledge if knowledge is not None else DEFAULT_KNOWLEDGE
    selected = frozenset(selected_symptoms)

    suggestions = tuple(
        ConditionSuggestion(condition=c, score=s, advice=kb.advice_for(c))
        for c, s in rank(score(selected, age, kb))
    )
    if not suggestions:
        suggestions = (
            ConditionSuggestion(
                condition=data.NO_MATCH_CONDITION, score=0, advice=data.NO_MATCH_ADVICE
            ),
        )

    reasons = urgent_reasons(selected, age, kb)
    return EvaluationResult(suggestions=suggestions, urgent=bool(reasons), urgent_reasons=reasons)
