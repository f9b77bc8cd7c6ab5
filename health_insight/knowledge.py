from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from . import data


class KnowledgeBase:
    """Read-only symptom -> condition weights, advice tips and urgent triggers.

    Built once and shared; nothing here mutates after __init__.
    """

    def __init__(
        self,
        symptoms: Iterable[str],
        weights: Iterable[Tuple[str, str, int]],
        advice: Mapping[str, str],
        urgent: Iterable[str],
        default_advice: str = data.DEFAULT_ADVICE,
    ):
        table: Dict[str, Dict[str, int]] = {}
        conditions: Dict[str, None] = {}
        for symptom, condition, weight in weights:
            per_symptom = table.setdefault(symptom, {})
            per_symptom[condition] = per_symptom.get(condition, 0) + int(weight)
            conditions.setdefault(condition, None)

        self._symptoms = tuple(dict.fromkeys(symptoms))
        self._weights = MappingProxyType(
            {s: MappingProxyType(dict(c)) for s, c in table.items()}
        )
        self._conditions = tuple(conditions)
        self._advice = MappingProxyType(dict(advice))
        self._urgent = frozenset(urgent)
        self._default_advice = default_advice

    def list_symptoms(self) -> Tuple[str, ...]:
        return self._symptoms

    def conditions(self) -> Tuple[str, ...]:
        return self._conditions

    def weights_for(self, symptom: str) -> Mapping[str, int]:
        return self._weights.get(symptom, MappingProxyType({}))

    def is_urgent(self, symptom: str) -> bool:
        return symptom in self._urgent

    def advice_for(self, condition: str) -> str:
        return self._advice.get(condition, self._default_advice)

    def display_index(self, symptom: str) -> Optional[int]:
        try:
            return self._symptoms.index(symptom)
        except ValueError:
            return None


def load_default() -> KnowledgeBase:
    return KnowledgeBase(
        symptoms=data.SYMPTOMS,
        weights=data.WEIGHTS,
        advice=data.ADVICE,
        urgent=data.URGENT_SYMPTOMS,
    )
