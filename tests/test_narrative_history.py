from intake_summary.narrative.catalog import CONDITION_CATALOG
from intake_summary.narrative.fields import FieldReader
from intake_summary.narrative.history import (
    past_medical_history_items,
    render_past_medical_history,
)


def _items(submission):
    return past_medical_history_items(FieldReader(submission))


def test_catalog_has_48_unique_conditions():
    keys = [key for key, _label in CONDITION_CATALOG]
    assert len(keys) == 48
    assert len(set(keys)) == 48


def test_diabetes_modifiers():
    assert _items({"cond_diabetes": "yes", "diabetesType": "Type 2", "diabetesAge": "45"}) == [
        "Diabetes (Type 2, dx age 45)"
    ]
    assert _items({"cond_diabetes": True, "diabetesInsulin": "yes"}) == ["Diabetes (on insulin)"]
    assert _items({"cond_diabetes": "yes"}) == ["Diabetes"]


def test_sleep_apnea_hep_c_and_menopause_modifiers():
    items = _items(
        {
            "cond_sleep_apnea": "yes",
            "sleepApneaCpap": "yes",
            "sleepApneaNoTolerate": "yes",
            "cond_hep_c": "yes",
            "cond_menopausal": "yes",
            "menopausalAge": "52",
        }
    )
    assert items == [
        "Post-menopausal (age 52)",
        "Sleep apnea (on CPAP, didn't tolerate CPAP)",
        "Hepatitis C (untreated)",
    ]
    assert _items({"cond_hep_c": "yes", "hepCTreated": "yes"}) == ["Hepatitis C (treated)"]


def test_unchecked_or_non_yes_values_are_ignored():
    assert _items({"cond_high_bp": "no", "cond_asthma": "on", "cond_gout": ""}) == []


def test_output_follows_catalog_order_not_submission_order():
    items = _items({"cond_lung_cancer": "yes", "cond_asthma": "yes", "cond_high_bp": "yes"})
    assert items == ["Hypertension", "Asthma", "Lung cancer"]


def test_free_text_other_conditions_and_surgeries_follow_catalog():
    items = _items(
        {
            "surgery_3_details": "Appendectomy",
            "surgery_3_year": "1999",
            "surgery_1_year": "2015",
            "other_condition_2_details": "Migraine",
            "other_condition_0_details": "Eczema",
            "cond_gi_other": "Gastritis",
            "cond_heart_other": " Murmur ",
            "cond_copd": "yes",
        }
    )
    assert items == [
        "COPD",
        "Murmur",
        "Gastritis",
        "Eczema",
        "Migraine",
        "2015",
        "Appendectomy (1999)",
    ]


def test_render_suffixes_each_item_with_period():
    block = render_past_medical_history(FieldReader({"cond_gout": "yes", "surgery_0_details": "Knee scope"}))
    assert block == "\nPAST MEDICAL HISTORY\nGout.\nKnee scope.\n"


def test_render_is_empty_without_items():
    assert render_past_medical_history(FieldReader({"surgery_0_details": " "})) == ""
