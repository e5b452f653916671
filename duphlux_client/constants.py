"""Shared Duphlux constants used by the engine, the client and the CLI."""

# Operation identifiers
OP_INITIALIZE_NUMBER_VERIFICATION = 1
OP_NUMBER_VERIFICATION_STATUS = 2

# Request methods
METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"

# Environments
ENV_LIVE = "LIVE"
ENV_TEST = "TEST"

# Verification outcomes reported by the status operation
VERIFICATION_STATUS_VERIFIED = "verified"
VERIFICATION_STATUS_PENDING = "pending"
VERIFICATION_STATUS_FAILED = "failed"

# Keys inside the response payload data
DATA_NUMBER_VERIFICATION_URL_KEY = "verification_url"
DATA_VERIFICATION_EXPIRY_DATE_KEY = "expires_at"
DATA_TRANSACTION_REFERENCE_KEY = "transaction_reference"
DATA_VERIFICATION_STATUS_KEY = "verification_status"

# Response envelope
PAYLOAD_KEY = "PayLoad"
PAYLOAD_STATUS_KEY = "status"
PAYLOAD_ERRORS_KEY = "errors"
PAYLOAD_DATA_KEY = "data"

DEFAULT_BASE_URL = "https://duphlux.com/webservice/authe"
DEFAULT_TIMEOUT = 10

OPERATION_MISMATCH_MESSAGE = "Method cannot be used with the current operation"
