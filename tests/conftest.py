"""Shared fixtures for the ProWrite test suite."""

import pytest

from prowrite.catalog import clear_cache


@pytest.fixture(autouse=True)
def fresh_catalogs(monkeypatch):
    """Every test reads the packaged catalogs from a cold cache."""
    monkeypatch.delenv("PROWRITE_CATALOG_DIR", raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def email_schema():
    """A cold-email input schema with required, optional and select fields."""
    return {
        "fields": [
            {
                "name": "recipient_name",
                "label": "Recipient Name",
                "type": "text",
                "required": True,
                "placeholder": "Jane Doe",
            },
            {"name": "company", "label": "Company", "type": "text", "required": True},
            {
                "name": "tone",
                "label": "Tone",
                "type": "select",
                "required": False,
                "options": ["Formal", "Friendly"],
            },
            {
                "name": "pitch",
                "label": "Pitch",
                "type": "textarea",
                "required": True,
                "validation": {"minLength": 10, "maxLength": 500},
            },
        ]
    }


@pytest.fixture
def hr_reply():
    """An HR docs reply: intro, fenced offer letter, separator, explanation."""
    return (
        "Here's the offer letter you requested:\n"
        "\n"
        "```\n"
        "Date: 12 March 2024\n"
        "\n"
        "Dear Priya Sharma,\n"
        "\n"
        "Subject: Offer Letter for Senior Analyst\n"
        "\n"
        "We are pleased to offer you the position of Senior Analyst.\n"
        "\n"
        "Sincerely,\n"
        "Rahul Mehta\n"
        "HR Manager\n"
        "Acme Corp\n"
        "```\n"
        "\n"
        "---\n"
        "\n"
        "**WHY THIS WORKS:**\n"
        "Clear structure."
    )
