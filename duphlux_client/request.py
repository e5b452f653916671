"""Catalog-agnostic request engine shared by concrete API clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from . import utils
from .constants import METHOD_DELETE, METHOD_GET, METHOD_POST, METHOD_PUT
from .errors import InvalidHookError
from .logging_config import log
from .messages import ClientState, HttpRequest, UnwrappedResult
from .operations import OperationCatalog
from .transport import RequestsTransport

Hook = Callable[["ApiRequest"], Any]


class ApiRequest(ABC):
    """Turns an operation from a catalog into one HTTP call and normalized state.

    Subclasses provide the catalog, the headers and the response unwrapping;
    the engine handles URL resolution, option merging, lifecycle hooks and
    transport dispatch. A client instance is not meant to be shared between
    threads.
    """

    METHOD_GET = METHOD_GET
    METHOD_POST = METHOD_POST
    METHOD_PUT = METHOD_PUT
    METHOD_DELETE = METHOD_DELETE

    def __init__(
        self,
        catalog: OperationCatalog,
        base_url: str,
        transport=None,
        verify_peer: bool = True,
        before_send: Optional[Hook] = None,
        after_send: Optional[Hook] = None,
    ):
        """Initialize the engine.

        Args:
            catalog: Operations this client can perform.
            base_url: URL every operation endpoint is appended to.
            transport: Object with a ``send(HttpRequest) -> TransportResult``
                method. Defaults to :class:`RequestsTransport`.
            verify_peer: Verify the server certificate. Disable only for
                testing against self-signed endpoints.
            before_send: Optional callable invoked with the client before
                each request.
            after_send: Optional callable invoked with the client after each
                request, including failed ones.
        """
        self.config = catalog
        self.base_url = base_url
        self.transport = transport if transport is not None else RequestsTransport()
        self.verify_peer = verify_peer
        self.before_send = before_send
        self.after_send = after_send
        self.state = ClientState()

    @abstractmethod
    def set_header(self, headers: Optional[Dict[str, str]] = None) -> None:
        """Set the request headers."""

    @abstractmethod
    def get_header(self) -> Dict[str, str]:
        """Return the headers sent with every request."""

    @abstractmethod
    def unwrap_response(self, response: Any) -> UnwrappedResult:
        """Extract status, error and data from a decoded response body."""

    def get_config(self) -> OperationCatalog:
        return self.config

    def get_operation(self):
        """Return the operation last started on this client."""
        return self.state.operation

    def set_operation(self, operation) -> None:
        self.state.operation = operation

    def get_operation_url(self) -> Optional[str]:
        return self.state.operation_url

    def set_operation_url(self, operation) -> str:
        """Resolve and store the absolute URL of an operation.

        Raises:
            UnknownOperationError: If the operation is not in the catalog.
        """
        self.state.operation_url = self.base_url + self.config.endpoint(operation)
        return self.state.operation_url

    def get_request_method(self) -> Optional[str]:
        return self.state.request_method

    def set_request_method(self, method: str) -> None:
        self.state.request_method = method

    def get_request_options(self) -> Any:
        return self.state.request_options

    def set_request_options(self, options: Any = None) -> "ApiRequest":
        """Merge options into the stored request options.

        Mapping options are merged key by key with the new values winning.
        Any other non-empty value replaces the stored options. Empty values
        leave them untouched.

        Args:
            options: New request parameters.

        Returns:
            ApiRequest: ``self`` for chaining.
        """
        if options:
            current = self.state.request_options
            if isinstance(options, Mapping) and isinstance(current, Mapping):
                self.state.request_options = {**current, **options}
            elif isinstance(options, Mapping):
                self.state.request_options = dict(options)
            else:
                self.state.request_options = options
        return self

    @property
    def has_error(self) -> bool:
        return self.state.has_error

    def get_status(self) -> Any:
        return self.state.status

    def get_error(self) -> Any:
        return self.state.error

    def get_response(self, key: Optional[str] = None) -> Any:
        """Return the decoded response, or one top-level value of it."""
        response = self.state.response
        if key:
            return response.get(key) if isinstance(response, Mapping) else None
        return response

    def set_data(self, data: Any) -> None:
        self.state.data = data

    def get_data(self, key: Optional[str] = None) -> Any:
        """Return the unwrapped response data, or one value of it."""
        data = self.state.data
        if key:
            return data.get(key) if isinstance(data, Mapping) else None
        return data

    def _call_hook(self, name: str) -> None:
        hook = getattr(self, name)
        if not hook:
            return
        if not callable(hook):
            raise InvalidHookError(name)
        hook(self)

    def _build_request(self) -> HttpRequest:
        method = self.get_request_method()
        options = self.get_request_options()

        body = None
        if method == METHOD_POST:
            body = utils.dict_to_json_bytes(options)
        elif method in (METHOD_PUT, METHOD_DELETE):
            body = options

        return HttpRequest(
            url=self.get_operation_url(),
            method=method,
            headers=dict(self.get_header()),
            body=body,
            verify_peer=self.verify_peer,
        )

    def _store_response(self, response: Any) -> None:
        self.state.response = response
        result = self.unwrap_response(response)
        self.state.status = result.status
        self.state.error = result.error
        self.set_data(result.data)
        self.state.has_error = result.has_error

    def send_request(self, operation, method: str = METHOD_GET, options: Any = None) -> Any:
        """Set up and send the request for an operation.

        Transport failures do not raise: they set ``has_error`` and the error
        text, leaving the previous response, status and data in place.

        Args:
            operation: Operation identifier from the catalog.
            method: HTTP method to use.
            options: Request parameters merged into the stored options.

        Returns:
            The decoded response of this call, or the previous one when the
            transport failed.

        Raises:
            UnknownOperationError: If the operation is not in the catalog.
            InvalidHookError: If a hook is set but not callable.
        """
        self.state.operation = operation
        self.set_operation_url(operation)
        self.set_request_method(method)
        self.set_request_options(options)
        self.state.has_error = False
        self.state.transport_failed = False

        self._call_hook("before_send")

        request = self._build_request()
        log.debug("Sending %s %s (operation=%s)", request.method, request.url, operation)
        result = self.transport.send(request)

        if result.error:
            log.warning("Transport error for %s %s: %s", request.method, request.url, result.error)
            self.state.has_error = True
            self.state.transport_failed = True
            self.state.error = result.error
        else:
            try:
                response = utils.json_bytes_to_value(result.raw_body or b"")
            except ValueError as exc:
                log.warning("Undecodable response body from %s: %s", request.url, exc)
                response = None
            self._store_response(response)

        self._call_hook("after_send")

        return self.state.response
