import pytest
from pydantic import ValidationError
from models import QueryValidationError, NOT_PROVIDED
from services import normalize_query
from services.QueryNormalizer import MAX_FIELD_CHARACTERS


@pytest.mark.parametrize("symptom,duration", [
    ("", "2 days"),
    ("   ", "2 days"),
    (None, "2 days"),
    ("Sore throat", ""),
    ("Sore throat", "\t\n"),
    ("Sore throat", None),
    ("", ""),
])
def test_missing_required_field_is_rejected(symptom, duration):
    with pytest.raises(QueryValidationError) as exc:
        normalize_query(symptom, duration, "some context")
    assert str(exc.value) == "Please provide at least the symptom and its duration."


@pytest.mark.parametrize("context", ["", "   ", None])
def test_blank_context_gets_placeholder(context):
    query = normalize_query("Sore throat", "2 days", context)
    assert query.context == NOT_PROVIDED == "Not provided"


def test_fields_are_stripped():
    query = normalize_query("  Mild headache ", " 3 weeks", " worse at night  ")
    assert query.symptom == "Mild headache"
    assert query.duration == "3 weeks"
    assert query.context == "worse at night"


def test_query_is_immutable():
    query = normalize_query("Sore throat", "2 days")
    with pytest.raises(ValidationError):
        query.symptom = "Cough"


def test_each_field_is_capped():
    query = normalize_query("s" * 1500, "d" * 1500, "c" * 2500)
    assert query.symptom == "s" * MAX_FIELD_CHARACTERS
    assert query.duration == "d" * MAX_FIELD_CHARACTERS
    assert query.context == "c" * MAX_FIELD_CHARACTERS


def test_custom_field_cap():
    query = normalize_query("Sore throat", "2 days", "worse at night", max_characters=5)
    assert query.symptom == "Sore"
    assert query.context == "worse"
