# health_insight/data.py
# Fixed knowledge table. Informational only; not diagnostic.

SYMPTOMS = [
    "Fever",
    "High Fever (>=39.5°C)",
    "Chills",
    "Cough",
    "Sore Throat",
    "Runny Nose",
    "Nasal Congestion",
    "Sneezing",
    "Headache",
    "Muscle Aches",
    "Fatigue",
    "Shortness of Breath",
    "Chest Pain/Pressure",
    "Loss of Taste/Smell",
    "Nausea",
    "Vomiting",
    "Diarrhea",
    "Abdominal Pain",
    "Rash/Itchy Skin",
    "Itchy/Watery Eyes",
    "Eye Redness/Irritation",
    "Dizziness/Lightheadedness",
    "Joint Pain",
    "Back Pain",
    "Heart Palpitations",
    "Urinary Burning/Pain",
    "Urinary Frequency/Urgency",
]

URGENT_SYMPTOMS = [
    "Chest Pain/Pressure",
    "Shortness of Breath",
    "High Fever (>=39.5°C)",
]

# (symptom, condition, weight)
WEIGHTS = [
    ("Sneezing", "Common Cold", 3),
    ("Runny Nose", "Common Cold", 3),
    ("Nasal Congestion", "Common Cold", 3),
    ("Sore Throat", "Common Cold", 2),
    ("Cough", "Common Cold", 2),
    ("Fever", "Common Cold", 1),
    ("Headache", "Common Cold", 1),
    ("Fatigue", "Common Cold", 1),

    ("High Fever (>=39.5°C)", "Influenza (Flu)", 4),
    ("Chills", "Influenza (Flu)", 3),
    ("Headache", "Influenza (Flu)", 3),
    ("Muscle Aches", "Influenza (Flu)", 3),
    ("Fatigue", "Influenza (Flu)", 2),
    ("Cough", "Influenza (Flu)", 2),
    ("Sore Throat", "Influenza (Flu)", 1),

    ("Fever", "COVID-19", 3),
    ("Cough", "COVID-19", 3),
    ("Fatigue", "COVID-19", 2),
    ("Loss of Taste/Smell", "COVID-19", 5),
    ("Shortness of Breath", "COVID-19", 3),
    ("Sore Throat", "COVID-19", 2),
    ("Headache", "COVID-19", 2),
    ("Muscle Aches", "COVID-19", 2),

    ("Sneezing", "Allergic Rhinitis (Allergies)", 4),
    ("Itchy/Watery Eyes", "Allergic Rhinitis (Allergies)", 4),
    ("Runny Nose", "Allergic Rhinitis (Allergies)", 4),
    ("Nasal Congestion", "Allergic Rhinitis (Allergies)", 3),
    ("Sore Throat", "Allergic Rhinitis (Allergies)", 1),
    ("Eye Redness/Irritation", "Allergic Rhinitis (Allergies)", 2),

    ("Headache", "Migraine", 5),
    ("Nausea", "Migraine", 2),
    ("Vomiting", "Migraine", 1),
    ("Dizziness/Lightheadedness", "Migraine", 2),

    ("Nausea", "Gastroenteritis (Stomach Bug)", 3),
    ("Vomiting", "Gastroenteritis (Stomach Bug)", 4),
    ("Diarrhea", "Gastroenteritis (Stomach Bug)", 4),
    ("Abdominal Pain", "Gastroenteritis (Stomach Bug)", 3),
    ("Fever", "Gastroenteritis (Stomach Bug)", 1),

    ("Nausea", "Foodborne Illness", 4),
    ("Vomiting", "Foodborne Illness", 5),
    ("Diarrhea", "Foodborne Illness", 4),
    ("Abdominal Pain", "Foodborne Illness", 3),
    ("Fever", "Foodborne Illness", 1),

    ("Urinary Burning/Pain", "Urinary Tract Irritation/UTI", 5),
    ("Urinary Frequency/Urgency", "Urinary Tract Irritation/UTI", 4),
    ("Fever", "Urinary Tract Irritation/UTI", 1),
    ("Back Pain", "Urinary Tract Irritation/UTI", 1),
    ("Abdominal Pain", "Urinary Tract Irritation/UTI", 1),

    ("Cough", "Acute Bronchitis (Irritated Airways)", 4),
    ("Fatigue", "Acute Bronchitis (Irritated Airways)", 2),
    ("Chest Pain/Pressure", "Acute Bronchitis (Irritated Airways)", 2),
    ("Shortness of Breath", "Acute Bronchitis (Irritated Airways)", 2),
    ("Fever", "Acute Bronchitis (Irritated Airways)", 1),

    ("Fever", "Pneumonia (Lung Infection)", 3),
    ("Cough", "Pneumonia (Lung Infection)", 3),
    ("Shortness of Breath", "Pneumonia (Lung Infection)", 4),
    ("Chest Pain/Pressure", "Pneumonia (Lung Infection)", 3),
    ("Chills", "Pneumonia (Lung Infection)", 2),
    ("Fatigue", "Pneumonia (Lung Infection)", 1),

    ("Sore Throat", "Sore Throat (Strep/Other)", 5),
    ("Fever", "Sore Throat (Strep/Other)", 2),
    ("Headache", "Sore Throat (Strep/Other)", 1),

    ("Nasal Congestion", "Sinus Irritation (Sinusitis)", 4),
    ("Runny Nose", "Sinus Irritation (Sinusitis)", 3),
    ("Headache", "Sinus Irritation (Sinusitis)", 3),
    ("Sore Throat", "Sinus Irritation (Sinusitis)", 1),
    ("Cough", "Sinus Irritation (Sinusitis)", 1),

    ("Rash/Itchy Skin", "Skin Irritation (Dermatitis)", 5),
    ("Itchy/Watery Eyes", "Skin Irritation (Dermatitis)", 1),

    ("Dizziness/Lightheadedness", "Dehydration/Low Fluids", 3),
    ("Fatigue", "Dehydration/Low Fluids", 2),
    ("Headache", "Dehydration/Low Fluids", 2),
    ("Vomiting", "Dehydration/Low Fluids", 1),
    ("Diarrhea", "Dehydration/Low Fluids", 1),

    ("Chest Pain/Pressure", "Reflux/Irritation (GERD-like)", 1),
    ("Abdominal Pain", "Reflux/Irritation (GERD-like)", 2),
    ("Nausea", "Reflux/Irritation (GERD-like)", 1),

    ("Heart Palpitations", "Stress/Anxiety Symptoms", 4),
    ("Shortness of Breath", "Stress/Anxiety Symptoms", 3),
    ("Dizziness/Lightheadedness", "Stress/Anxiety Symptoms", 2),
    ("Chest Pain/Pressure", "Stress/Anxiety Symptoms", 2),
]

ADVICE = {
    "Common Cold": "Rest, stay hydrated, consider warm fluids. Over-the-counter symptom relief may help. Seek care if symptoms persist/worsen.",
    "Influenza (Flu)": "Rest, fluids, and fever control as advised by a clinician. Consider medical care if high risk or severe symptoms.",
    "COVID-19": "Consider testing per local guidance. Rest, hydration, and isolation if appropriate. Seek care if breathing issues or high-risk factors.",
    "Allergic Rhinitis (Allergies)": "Reduce exposure to triggers, consider saline rinses. Over-the-counter allergy relief may help; consult a pharmacist/clinician.",
    "Migraine": "Rest in a dark, quiet room; stay hydrated. Discuss migraine-specific options with a clinician if recurrent or severe.",
    "Gastroenteritis (Stomach Bug)": "Small sips of fluids and oral rehydration. Seek care for signs of dehydration, blood, or persistent high fever.",
    "Foodborne Illness": "Hydration and gradual diet as tolerated. Seek care if severe pain, blood, or persistent symptoms.",
    "Urinary Tract Irritation/UTI": "Increase fluids; seek medical evaluation, especially if fever, back pain, or persistent symptoms.",
    "Acute Bronchitis (Irritated Airways)": "Rest, fluids; avoid smoke/irritants. Seek care if high fever, breathing difficulty, or worsening symptoms.",
    "Pneumonia (Lung Infection)": "May require clinical evaluation. Seek care promptly, especially with breathing issues or high fever.",
    "Sore Throat (Strep/Other)": "Hydration, throat soothing measures. Consider medical check, especially with fever or severe pain.",
    "Sinus Irritation (Sinusitis)": "Steam, saline rinses, hydration. Seek care if symptoms are severe or persist.",
    "Skin Irritation (Dermatitis)": "Avoid irritants; gentle skincare. Seek medical advice if widespread, painful, or infected.",
    "Dehydration/Low Fluids": "Increase fluid intake (oral rehydration). Seek care for confusion, fainting, or inability to keep fluids down.",
    "Reflux/Irritation (GERD-like)": "Smaller meals, avoid trigger foods, avoid lying down after eating. Seek evaluation for severe or persistent pain.",
    "Stress/Anxiety Symptoms": "Breathing and grounding techniques may help. Seek medical evaluation to rule out other causes, especially with chest pain.",
}

DEFAULT_ADVICE = "Monitor your symptoms and seek medical advice if needed."

NO_MATCH_CONDITION = "No clear match"
NO_MATCH_ADVICE = "Consider rest, fluids, and monitoring. Seek professional advice if symptoms persist or worsen."

# Conditions bumped by one point for older adults. "Pneumonia" is matched
# literally and does not alias "Pneumonia (Lung Infection)".
SENIOR_AGE = 65
SENIOR_BUMPED_CONDITIONS = ["Pneumonia", "Influenza (Flu)", "COVID-19"]

CHEST_PAIN = "Chest Pain/Pressure"
SHORTNESS_OF_BREATH = "Shortness of Breath"
HIGH_FEVER = "High Fever (>=39.5°C)"
YOUNG_CHILD_MAX_AGE = 5

TOP_N = 3
