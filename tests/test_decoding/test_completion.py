"""Tests for adapt_completion: untyped delivery -> one typed DecodeResult."""

import pytest

from modelizer.decoding import (
    BodyParseError,
    DecodeErrorKind,
    TransportError,
    TypeMismatchError,
    adapt_completion,
)
from modelizer.decoding.ports.http import RequestDescriptor, ResponseDescriptor
from modelizer.shared.models import Listing, Unit

REQUEST = RequestDescriptor(method="GET", url="https://api.example.test/listings/1")
RESPONSE = ResponseDescriptor(status_code=200, url=REQUEST.url)


class Recorder:
    def __init__(self):
        self.results = []

    def __call__(self, result):
        self.results.append(result)


class TestAdaptCompletion:
    def test_model_of_expected_type_is_delivered(self):
        recorder = Recorder()
        wrap = adapt_completion(recorder, Listing)

        wrap(REQUEST, RESPONSE, Listing(id=1), None)

        assert len(recorder.results) == 1
        assert recorder.results[0].model == Listing(id=1)
        assert recorder.results[0].error is None

    def test_decode_error_is_forwarded_unchanged(self):
        recorder = Recorder()
        error = BodyParseError("invalid JSON")
        wrap = adapt_completion(recorder, Listing)

        wrap(REQUEST, RESPONSE, None, error)

        assert recorder.results[0].error is error
        assert recorder.results[0].model is None

    def test_error_wins_over_value(self):
        recorder = Recorder()
        error = BodyParseError("invalid JSON")
        wrap = adapt_completion(recorder, Listing)

        wrap(REQUEST, RESPONSE, Listing(id=1), error)

        assert recorder.results[0].error is error

    def test_foreign_exception_becomes_transport_error(self):
        recorder = Recorder()
        cause = ConnectionError("reset by peer")
        wrap = adapt_completion(recorder, Listing)

        wrap(REQUEST, None, None, cause)

        error = recorder.results[0].error
        assert isinstance(error, TransportError)
        assert error.cause is cause
        assert error.url == REQUEST.url
        assert error.status_code is None

    def test_wrong_type_is_type_mismatch(self):
        recorder = Recorder()
        wrap = adapt_completion(recorder, Listing)

        wrap(REQUEST, RESPONSE, Unit(), None)

        error = recorder.results[0].error
        assert isinstance(error, TypeMismatchError)
        assert error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert error.expected is Listing
        assert error.actual is Unit
        assert error.message == "wrong type returned but no error given"

    def test_missing_value_without_error_is_type_mismatch(self):
        recorder = Recorder()
        wrap = adapt_completion(recorder, Listing)

        wrap(REQUEST, RESPONSE, None, None)

        assert isinstance(recorder.results[0].error, TypeMismatchError)
        assert recorder.results[0].model is None

    def test_object_accepts_any_value(self):
        recorder = Recorder()
        wrap = adapt_completion(recorder, object)

        wrap(REQUEST, RESPONSE, [1, 2, 3], None)

        assert recorder.results[0].model == [1, 2, 3]

    def test_second_delivery_is_rejected(self):
        recorder = Recorder()
        wrap = adapt_completion(recorder, Listing)
        wrap(REQUEST, RESPONSE, Listing(id=1), None)

        with pytest.raises(RuntimeError, match="already delivered"):
            wrap(REQUEST, RESPONSE, Listing(id=2), None)

        assert len(recorder.results) == 1
