"""Checkbox conditions offered on the intake form, in output order."""

from __future__ import annotations

from typing import Tuple

CONDITION_CATALOG: Tuple[Tuple[str, str], ...] = (
    ("cond_high_bp", "Hypertension"),
    ("cond_cholesterol", "Cholesterol problems"),
    ("cond_diabetes", "Diabetes"),
    ("cond_erectile_dysfunction", "Erectile dysfunction"),
    ("cond_menopausal", "Post-menopausal"),
    ("cond_stroke", "Stroke"),
    ("cond_sleep_apnea", "Sleep apnea"),
    ("cond_kidney_disease", "Kidney disease"),
    ("cond_heart_attack", "Myocardial infarction"),
    ("cond_angina", "Angina"),
    ("cond_angioplasty", "Coronary angioplasty"),
    ("cond_cabg", "CABG"),
    ("cond_valve_surgery", "Valve surgery"),
    ("cond_defib", "ICD"),
    ("cond_pacemaker", "Permanent pacemaker"),
    ("cond_atrial_fib", "Atrial fibrillation"),
    ("cond_heart_failure", "Heart failure"),
    ("cond_asthma", "Asthma"),
    ("cond_copd", "COPD"),
    ("cond_emphysema", "Emphysema"),
    ("cond_pulmonary_embolism", "Pulmonary embolism"),
    ("cond_heart_burn", "Gastroesophageal reflux"),
    ("cond_ibs", "IBS"),
    ("cond_ulcerative_colitis", "Ulcerative colitis"),
    ("cond_crohns", "Crohn's disease"),
    ("cond_celiac", "Celiac disease"),
    ("cond_fatty_liver", "Fatty liver"),
    ("cond_cirrhosis", "Cirrhosis"),
    ("cond_hep_c", "Hepatitis C"),
    ("cond_anxiety", "Anxiety"),
    ("cond_depression", "Depression"),
    ("cond_panic_attacks", "Panic attacks"),
    ("cond_ptsd", "PTSD"),
    ("cond_schizophrenia", "Schizophrenia"),
    ("cond_bipolar", "Bipolar disorder"),
    ("cond_osteoarthritis", "Osteoarthritis"),
    ("cond_rheumatoid_arthritis", "Rheumatoid arthritis"),
    ("cond_gout", "Gout"),
    ("cond_osteoporosis", "Osteoporosis"),
    ("cond_lupus", "Systemic lupus"),
    ("cond_chronic_pain", "Chronic pain"),
    ("cond_chronic_fatigue", "Chronic fatigue syndrome"),
    ("cond_hypothyroidism", "Hypothyroidism"),
    ("cond_hyperthyroidism", "Hyperthyroidism"),
    ("cond_breast_cancer", "Breast cancer"),
    ("cond_prostate_cancer", "Prostate cancer"),
    ("cond_bowel_cancer", "Colorectal cancer"),
    ("cond_lung_cancer", "Lung cancer"),
)

# Free-text "other" boxes under the heart, GI and cancer groups.
FREE_TEXT_CONDITION_FIELDS: Tuple[str, ...] = (
    "cond_heart_other",
    "cond_gi_other",
    "cond_cancer_other",
)

__all__ = ["CONDITION_CATALOG", "FREE_TEXT_CONDITION_FIELDS"]
