"""Completion adaptation.

ModelRequest.response() hands its completion an untyped value and an error,
because one request handle serves every serializer. adapt_completion narrows
that value back to the model type and delivers a single DecodeResult.
"""

import threading
from typing import Any, TypeVar

from modelizer.decoding.exceptions import DecodeError, TransportError, TypeMismatchError
from modelizer.decoding.ports.decoders import Completion, UntypedCompletion
from modelizer.decoding.ports.http import RequestDescriptor, ResponseDescriptor
from modelizer.decoding.result import DecodeResult
from modelizer.infrastructure.observability import bind_exchange, get_decoding_logger

T = TypeVar("T")


def adapt_completion(
    completion: Completion[T],
    model_type: type[T],
) -> UntypedCompletion:
    """Wrap a typed completion so it can receive an untyped delivery.

    Args:
        completion: Receives exactly one DecodeResult[T]
        model_type: Runtime type the delivered value must be an instance of

    Returns:
        Callback of shape (request, response, value, error). Calling it more
        than once raises RuntimeError.
    """
    log = get_decoding_logger("completion-adapter", model=model_type.__name__)
    lock = threading.Lock()
    delivered = False

    def completion_wrap(
        request: RequestDescriptor,
        response: ResponseDescriptor | None,
        value: Any,
        error: BaseException | None,
    ) -> None:
        nonlocal delivered
        with lock:
            if delivered:
                raise RuntimeError(f"completion for {request.url} already delivered")
            delivered = True

        status_code = response.status_code if response is not None else None

        if error is not None:
            if not isinstance(error, DecodeError):
                error = TransportError.from_exception(
                    error, url=request.url, status_code=status_code
                )
            result: DecodeResult[T] = DecodeResult.fail(error)
        elif isinstance(value, model_type):
            result = DecodeResult.ok(value)
        else:
            bind_exchange(log, request.url, status_code).warning(
                "completion_type_mismatch",
                expected=model_type.__name__,
                actual=type(value).__name__,
            )
            result = DecodeResult.fail(
                TypeMismatchError(
                    "wrong type returned but no error given",
                    expected=model_type,
                    actual=type(value),
                    url=request.url,
                    status_code=status_code,
                )
            )

        completion(result)

    return completion_wrap
