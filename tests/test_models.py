"""Tests for extraction result serialization."""
from models.extraction import ErrorKind, ExtractionFailure, ExtractionSuccess


def test_success_to_dict():
    result = ExtractionSuccess(reference_code="6KX2_1", source="argenprop.com",
                               url="https://www.argenprop.com/x", scraped_at="2024-05-01T12:00:00+00:00")

    assert result.success is True
    assert result.to_dict() == {
        "success": True,
        "data": {
            "referenceCode": "6KX2_1",
            "source": "argenprop.com",
            "url": "https://www.argenprop.com/x",
            "scrapedAt": "2024-05-01T12:00:00+00:00",
        },
    }


def test_failure_to_dict_omits_unknown_fields():
    result = ExtractionFailure(error="URL is required", kind=ErrorKind.INPUT)

    assert result.success is False
    assert result.to_dict() == {"success": False, "error": "URL is required", "kind": "input"}


def test_failure_to_dict_with_source():
    result = ExtractionFailure(error="Could not extract reference code", url="https://zonaprop.com.ar/x",
                               source="zonaprop.com.ar", kind=ErrorKind.EXTRACTION)

    assert result.to_dict() == {
        "success": False,
        "error": "Could not extract reference code",
        "kind": "extraction",
        "source": "zonaprop.com.ar",
        "url": "https://zonaprop.com.ar/x",
    }


def test_scraped_at_defaults_to_utc_timestamp():
    result = ExtractionSuccess(reference_code="1", source="s", url="u")
    assert result.scraped_at.endswith("+00:00")
