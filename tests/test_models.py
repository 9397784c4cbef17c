"""Tests for request validation and result models."""

import dataclasses

import pytest

from revelio.core.exceptions import InputError
from revelio.models import ExtractionMode, ExtractionRequest, Finding, UrlResult


@pytest.mark.unit
class TestExtractionRequest:

    def test_dictionary_request(self):
        request = ExtractionRequest.dictionary(["https://a/x.js"], ["apiKey", "token"])
        assert request.mode == ExtractionMode.DICTIONARY
        assert request.urls == ("https://a/x.js",)
        assert request.variables == ("apiKey", "token")
        assert request.min_length == 0

    def test_dictionary_requires_variables(self):
        with pytest.raises(InputError):
            ExtractionRequest.dictionary(["https://a/x.js"], [])

    def test_urls_are_required(self):
        with pytest.raises(InputError, match="No URLs"):
            ExtractionRequest.enumeration([])

    def test_enumeration_rejects_variables(self):
        with pytest.raises(InputError):
            ExtractionRequest(
                urls=("https://a/x.js",),
                mode=ExtractionMode.ENUMERATION,
                variables=("apiKey",)
            )

    def test_negative_min_length_rejected(self):
        with pytest.raises(InputError):
            ExtractionRequest.enumeration(["https://a/x.js"], min_length=-1)

    def test_dictionary_drops_enumeration_filters(self):
        request = ExtractionRequest(
            urls=("https://a/x.js",),
            mode=ExtractionMode.DICTIONARY,
            variables=("apiKey",),
            filters=("key",),
            min_length=4
        )
        assert request.filters == ()
        assert request.min_length == 0

    def test_single_url_string_is_not_split(self):
        request = ExtractionRequest.enumeration("https://a/x.js")
        assert request.urls == ("https://a/x.js",)

    def test_request_is_frozen(self):
        request = ExtractionRequest.enumeration(["https://a/x.js"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.min_length = 3


@pytest.mark.unit
class TestResults:

    def test_finding_renders_as_assignment(self):
        assert str(Finding("apiKey", "abc")) == "apiKey = abc"

    def test_failure_has_no_findings(self):
        result = UrlResult.failure("https://a/x.js", "HTTP 404")
        assert not result.ok
        assert result.findings == ()
        assert result.error == "HTTP 404"

    def test_failure_cannot_carry_findings(self):
        with pytest.raises(ValueError):
            UrlResult("https://a/x.js", (Finding("a", "b"),), error="boom")

    def test_dict_round_trip(self):
        result = UrlResult("https://a/x.js", [Finding("a", "1"), Finding("a", "1")])
        restored = UrlResult.from_dict(result.to_dict())
        assert restored == result
        assert isinstance(restored.findings, tuple)
