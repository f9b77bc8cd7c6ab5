from datetime import datetime

from health_insight import data
from health_insight.engine import ConditionSuggestion, EvaluationResult, evaluate
from health_insight.schemas import AssessmentRecord
from health_insight.summary import (
    advice_summary,
    render_history,
    render_insights,
    symptoms_csv,
    top_conditions_summary,
)


def test_symptoms_csv_follows_checklist_order(knowledge):
    assert symptoms_csv({"Sneezing", "Fever", "Runny Nose"}, knowledge) == "Fever, Runny Nose, Sneezing"


def test_symptoms_csv_puts_unknown_names_last(knowledge):
    assert symptoms_csv(["Hiccups", "Cough", "Achy Ears"], knowledge) == "Cough, Achy Ears, Hiccups"


def test_top_conditions_summary():
    result = evaluate({"Sneezing", "Itchy/Watery Eyes", "Runny Nose"}, 25, "Male")
    assert top_conditions_summary(result) == (
        "Allergic Rhinitis (Allergies) (score 12); Common Cold (score 6); "
        "Sinus Irritation (Sinusitis) (score 3)"
    )


def test_advice_summary_keeps_distinct_tips_in_order():
    result = EvaluationResult(
        suggestions=(
            ConditionSuggestion("A", 3, "tip one"),
            ConditionSuggestion("B", 2, "tip two"),
            ConditionSuggestion("C", 1, "tip one"),
        ),
        urgent=False,
    )
    assert advice_summary(result) == "tip one | tip two"


def test_insights_report_with_urgent_warning(knowledge):
    selected = {"Chest Pain/Pressure", "Shortness of Breath"}
    result = evaluate(selected, 70, "Male")
    text = render_insights(
        result, selected, knowledge, name=" Sam ", age=70, notes="  started today ",
        generated_at=datetime(2024, 1, 2, 3, 4, 5),
    )
    lines = text.splitlines()
    assert lines[0] == "Hello Sam, here are your personalized insights:"
    assert "! URGENT WARNING !" in lines
    assert "Most likely possibilities (not a diagnosis):" in lines
    assert "  1) Pneumonia (Lung Infection) (score 7)" in lines
    assert f"     Tip: {data.ADVICE['Pneumonia (Lung Infection)']}" in lines
    assert "  • Adults 65+ should consider earlier medical advice." in lines
    assert "Selected symptoms: Shortness of Breath, Chest Pain/Pressure" in lines
    assert "Notes: started today" in lines
    assert lines[-1] == "Generated: 2024-01-02T03:04:05"


def test_insights_report_without_name_or_warning(knowledge):
    result = evaluate({"Headache"}, 30, "Female")
    text = render_insights(result, {"Headache"}, knowledge, age=30)
    assert text.startswith("Hello, here are your personalized insights:")
    assert "URGENT" not in text
    assert "Adults 65+" not in text
    assert "Notes:" not in text


def test_history_report():
    records = [
        AssessmentRecord(
            id=2, user_id=1, symptoms="Cough", top_conditions="Acute Bronchitis (Irritated Airways) (score 4)",
            advice="x", urgent=True, notes="night cough", created_at=datetime(2024, 5, 1, 9, 30),
        ),
        AssessmentRecord(
            id=1, user_id=1, symptoms="Headache", top_conditions="Migraine (score 5)",
            advice="y", urgent=False, notes=None, created_at=datetime(2024, 4, 1, 8, 0),
        ),
    ]
    text = render_history("Sam", records)
    assert text.startswith("Recent assessments for Sam:\n\n1) 2024-05-01 09:30:00\n")
    assert "   Flag: URGENT" in text
    assert "   Notes: night cough" in text
    assert text.count("Flag: URGENT") == 1
    assert "2) 2024-04-01 08:00:00" in text
