import pytest
from models import ServiceUnavailableError
from services import EducationService, normalize_query
from conftest import FakeGenerationClient, run

FALLBACK = "<p>Unable to generate response. Please try again.</p>"
UNAVAILABLE = "Failed to connect to the educational database. Please check your connection."


def make_service(client, template_parser):
    return EducationService(generation_client=client, template_parser=template_parser)


def test_prompt_embeds_query_lines(fake_client, template_parser):
    service = make_service(fake_client, template_parser)
    prompt = service.build_prompt(normalize_query("Sore throat", "2 days", ""))

    lines = prompt.splitlines()
    assert "Symptom: Sore throat" in lines
    assert "Duration: 2 days" in lines
    assert "General context: Not provided" in lines
    assert lines[-1] == "Provide an educational response following the required structure and safety rules."


def test_prompt_keeps_dollar_signs_from_user_input(fake_client, template_parser):
    service = make_service(fake_client, template_parser)
    prompt = service.build_prompt(normalize_query("Rash", "1 week", "after a $5 sunscreen"))
    assert "General context: after a $5 sunscreen" in prompt


def test_system_policy_lists_the_five_sections_in_order(fake_client, template_parser):
    policy = make_service(fake_client, template_parser).build_system_prompt()

    sections = [
        "1. General Explanation",
        "2. When It’s Usually Mild",
        "3. Red Flags – When to Seek Professional Care",
        "4. General Self-Care Suggestions",
        "5. Disclaimer",
    ]
    positions = [policy.index(section) for section in sections]
    assert positions == sorted(positions)
    assert "Use ONLY the following HTML tags: <h3>, <p>, <ul>, <li>, <strong>" in policy
    assert "DO NOT use Markdown syntax" in policy
    assert "not suitable for emergencies" in policy


def test_request_carries_policy_prompt_and_low_temperature(fake_client, template_parser):
    service = make_service(fake_client, template_parser)
    answer = run(service.get_health_education(normalize_query("Sore throat", "2 days")))

    assert answer == fake_client.answer
    assert len(fake_client.calls) == 1
    call = fake_client.calls[0]
    assert call["system_prompt"] == service.build_system_prompt()
    assert "Symptom: Sore throat" in call["prompt"]
    assert "You are a health education assistant." not in call["prompt"]
    assert call["temperature"] == pytest.approx(0.1)


@pytest.mark.parametrize("empty", ["", None, "   \n"])
def test_empty_answer_is_replaced_by_fallback(template_parser, empty):
    service = make_service(FakeGenerationClient(answer=empty), template_parser)
    answer = run(service.get_health_education(normalize_query("Cough", "3 days")))
    assert answer == FALLBACK


@pytest.mark.parametrize("error", [
    ConnectionError("network down"),
    PermissionError("API key not valid"),
    KeyError("candidates"),
    RuntimeError("boom"),
])
def test_service_errors_become_generic_unavailable(template_parser, error):
    service = make_service(FakeGenerationClient(error=error), template_parser)

    with pytest.raises(ServiceUnavailableError) as exc:
        run(service.get_health_education(normalize_query("Cough", "3 days")))

    assert str(exc.value) == UNAVAILABLE
    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__
    assert str(error) not in str(exc.value)


def test_service_error_is_logged(template_parser, caplog):
    service = make_service(FakeGenerationClient(error=ConnectionError("network down")), template_parser)

    with caplog.at_level("ERROR", logger="uvicorn.error"):
        with pytest.raises(ServiceUnavailableError):
            run(service.get_health_education(normalize_query("Cough", "3 days")))

    assert "network down" in caplog.text
