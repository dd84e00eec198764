"""
Test suite for the generation prompt builder.

Run with:
    pytest generation/tests/test_prompts.py -v
"""

import pytest

from generation.prompts import BULLET, CRM_NOTES_CHAR_LIMIT, build_prompt


@pytest.fixture
def transcript():
    return (
        "Broker: Hi John, thanks for joining.\n"
        "Client John: We want a £200,000 mortgage on a £250,000 flat.\n"
        "Broker: I'll get a DIP started and send you the document list."
    )


@pytest.mark.unit
def test_transcript_is_embedded_verbatim_between_fences(transcript):
    prompt = build_prompt(transcript)

    assert f"---\n{transcript}\n---" in prompt


@pytest.mark.unit
def test_prompt_is_deterministic(transcript):
    assert build_prompt(transcript) == build_prompt(transcript)


@pytest.mark.unit
def test_no_trimming_or_truncation():
    padded = "   leading and trailing whitespace kept   "
    long_transcript = "word " * 50_000

    assert f"---\n{padded}\n---" in build_prompt(padded)
    assert long_transcript in build_prompt(long_transcript)


@pytest.mark.unit
def test_braces_in_transcript_are_not_interpreted():
    transcript = "Client said {name} and {{ltv}} literally"

    assert transcript in build_prompt(transcript)


@pytest.mark.unit
def test_email_directives_present(transcript):
    prompt = build_prompt(transcript)

    assert '"Hi [name],"' in prompt
    assert "moneyhelper.org.uk" in prompt
    assert "bulleted list" in prompt
    assert "Do NOT add any sign-off" in prompt
    assert "mailto: link must be URL-encoded" in prompt
    assert "subject line" in prompt


@pytest.mark.unit
def test_crm_directives_present(transcript):
    prompt = build_prompt(transcript)

    assert f"using '{BULLET.strip()}' as the bullet point character" in prompt
    assert f"under {CRM_NOTES_CHAR_LIMIT} characters" in prompt
    assert "LTV, DIP, FTB" in prompt
