"""Duphlux phone-number verification client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from . import utils
from .config import ClientConfig
from .constants import (
    DATA_NUMBER_VERIFICATION_URL_KEY,
    DATA_TRANSACTION_REFERENCE_KEY,
    DATA_VERIFICATION_EXPIRY_DATE_KEY,
    DATA_VERIFICATION_STATUS_KEY,
    DEFAULT_BASE_URL,
    ENV_LIVE,
    ENV_TEST,
    METHOD_POST,
    OP_INITIALIZE_NUMBER_VERIFICATION,
    OP_NUMBER_VERIFICATION_STATUS,
    PAYLOAD_DATA_KEY,
    PAYLOAD_ERRORS_KEY,
    PAYLOAD_KEY,
    PAYLOAD_STATUS_KEY,
    VERIFICATION_STATUS_FAILED,
    VERIFICATION_STATUS_PENDING,
    VERIFICATION_STATUS_VERIFIED,
)
from .errors import ProtocolError, TransportError
from .guard import VERIFICATION_TRANSITIONS, OperationGuard
from .logging_config import log
from .messages import UnwrappedResult
from .operations import DUPHLUX_OPERATIONS
from .request import ApiRequest, Hook
from .transport import RequestsTransport
from .validation import validate_options


class DuphluxClient(ApiRequest):
    """Two-step phone-number verification against the Duphlux API.

    Usage:
        client = DuphluxClient("my-token")
        client.authenticate({
            "phone_number": "2348012345678",
            "transaction_reference": DuphluxClient.generate_ref(),
            "redirect_url": "https://example.com/callback",
        })
        url = client.get_verification_url()
        ...
        if client.check_status(reference).is_verified():
            ...
    """

    OP_INITIALIZE_NUMBER_VERIFICATION = OP_INITIALIZE_NUMBER_VERIFICATION
    OP_NUMBER_VERIFICATION_STATUS = OP_NUMBER_VERIFICATION_STATUS

    ENV_LIVE = ENV_LIVE
    ENV_TEST = ENV_TEST

    def __init__(
        self,
        access_token: Optional[str] = None,
        environment: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport=None,
        before_send: Optional[Hook] = None,
        after_send: Optional[Hook] = None,
    ):
        """Initialize the client.

        Args:
            access_token: API token. When omitted, the token configured for
                the environment is used.
            environment: ``LIVE`` or ``TEST``; defaults to the configured one.
            config: Credentials and connection settings.
            transport: Transport override, mainly for tests.
            before_send: Optional hook called with the client before each request.
            after_send: Optional hook called with the client after each request.
        """
        self.client_config = config if config is not None else ClientConfig()
        if transport is None:
            transport = RequestsTransport(timeout=self.client_config.timeout)

        super().__init__(
            DUPHLUX_OPERATIONS,
            base_url=DEFAULT_BASE_URL,
            transport=transport,
            verify_peer=self.client_config.verify_peer,
            before_send=before_send,
            after_send=after_send,
        )
        self.guard = OperationGuard(VERIFICATION_TRANSITIONS)
        self.environment = environment or self.client_config.environment
        self.api_token: Optional[str] = None
        self.header: Dict[str, str] = {}
        self.set_base_url(self.client_config.base_url)
        self.set_api_token(access_token)

    def get_environment(self) -> str:
        return self.environment

    def get_api_token(self) -> Optional[str]:
        return self.api_token

    def set_api_token(self, token: Optional[str] = None) -> None:
        """Set the token used for requests and rebuild the headers.

        Args:
            token: Explicit token. When empty, the configured token for the
                client's environment is used.
        """
        if token:
            self.api_token = token
        else:
            self.api_token = self.client_config.token_for(self.environment)
            if not self.api_token:
                log.warning("No access token configured for environment %s", self.environment)
        self.set_header()

    def set_header(self, headers: Optional[Dict[str, str]] = None) -> None:
        """Build the auth headers and merge any extra headers into them."""
        auth_header = {
            "token": self.get_api_token() or "",
            "Content-type": "application/json",
            "Cache-Control": "no-cache",
        }
        self.header = {**auth_header, **(headers or {})}

    def get_header(self) -> Dict[str, str]:
        return self.header

    def set_operation(self, operation) -> None:
        super().set_operation(operation)
        self.guard.begin(operation)

    def set_base_url(self, url: Optional[str] = None) -> None:
        """Set the API base URL; an empty value keeps the current one or the default."""
        if not url:
            if not self.base_url:
                self.base_url = DEFAULT_BASE_URL
        else:
            self.base_url = url.rstrip("/")

    def get_base_url(self) -> str:
        return self.base_url

    def unwrap_response(self, response: Any) -> UnwrappedResult:
        """Unpack the ``PayLoad`` envelope of a Duphlux response.

        A missing envelope or an empty status yields a result flagged as an
        error, whatever the ``errors`` field says.
        """
        payload = response.get(PAYLOAD_KEY) if isinstance(response, Mapping) else None
        if not isinstance(payload, Mapping):
            log.warning("Response has no %s envelope", PAYLOAD_KEY)
            return UnwrappedResult()

        data = payload.get(PAYLOAD_DATA_KEY)
        return UnwrappedResult(
            status=payload.get(PAYLOAD_STATUS_KEY),
            error=payload.get(PAYLOAD_ERRORS_KEY),
            data=data if data is not None else {},
        )

    def _perform(self, operation, options: Dict[str, Any]) -> "DuphluxClient":
        self.set_operation(operation)
        validate_options(options, operation, self.config)
        self.send_request(operation, METHOD_POST, options)
        self.guard.complete(operation)
        return self

    def authenticate(self, options: Dict[str, Any]) -> "DuphluxClient":
        """Initiate a verification transaction.

        Args:
            options: ``phone_number``, ``transaction_reference`` and
                ``redirect_url`` for the transaction.

        Returns:
            DuphluxClient: ``self``; chain with :meth:`redirect` or read
            :meth:`get_verification_url`.

        Raises:
            MissingParameterError: If a required option is absent or blank.
        """
        return self._perform(OP_INITIALIZE_NUMBER_VERIFICATION, options)

    def check_status(self, reference: str) -> "DuphluxClient":
        """Query the status of a transaction started with :meth:`authenticate`.

        Args:
            reference: Transaction reference used when initiating.

        Returns:
            DuphluxClient: ``self``; chain with :meth:`is_verified`,
            :meth:`is_pending` or :meth:`is_failed`.

        Raises:
            MissingParameterError: If the reference is blank.
        """
        return self._perform(OP_NUMBER_VERIFICATION_STATUS, {DATA_TRANSACTION_REFERENCE_KEY: reference})

    def redirect(self, redirector: Optional[Callable[[str], Any]] = None) -> Any:
        """Hand the verification URL of the last :meth:`authenticate` call on.

        Args:
            redirector: Callable turning the URL into a redirect, e.g. a web
                framework's redirect response factory.

        Returns:
            The redirector's result, the URL when no redirector is given, or
            ``None`` when the response carried no URL.

        Raises:
            OperationMismatchError: If the last operation was not an initiation.
        """
        self.guard.require(OP_INITIALIZE_NUMBER_VERIFICATION)
        verification_url = self.get_data(DATA_NUMBER_VERIFICATION_URL_KEY)
        if not verification_url:
            return None
        if redirector is None:
            return verification_url
        return redirector(verification_url)

    def _verification_status_is(self, expected: str) -> bool:
        self.guard.require(OP_NUMBER_VERIFICATION_STATUS)
        return self.get_data(DATA_VERIFICATION_STATUS_KEY) == expected

    def is_verified(self) -> bool:
        """Return True if the checked transaction was verified."""
        return self._verification_status_is(VERIFICATION_STATUS_VERIFIED)

    def is_pending(self) -> bool:
        """Return True if the checked transaction is still pending."""
        return self._verification_status_is(VERIFICATION_STATUS_PENDING)

    def is_failed(self) -> bool:
        """Return True if the checked transaction failed."""
        return self._verification_status_is(VERIFICATION_STATUS_FAILED)

    def get_verification_url(self) -> Optional[str]:
        return self.get_data(DATA_NUMBER_VERIFICATION_URL_KEY)

    def get_expiry(self) -> Any:
        return self.get_data(DATA_VERIFICATION_EXPIRY_DATE_KEY)

    def get_transaction_reference(self) -> Optional[str]:
        return self.get_data(DATA_TRANSACTION_REFERENCE_KEY)

    def raise_for_error(self) -> None:
        """Raise the error recorded by the last request, if any.

        Raises:
            TransportError: If the transport failed.
            ProtocolError: If the remote reported an error or an empty status.
        """
        if not self.has_error:
            return
        if self.state.transport_failed:
            raise TransportError(str(self.get_error()))
        raise ProtocolError(str(self.get_error() or "Empty status in response"))

    @staticmethod
    def generate_ref(length: int = 10) -> str:
        return utils.generate_ref(length)
