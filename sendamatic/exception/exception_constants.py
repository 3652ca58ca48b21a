VALIDATION_FAILED = "message validation failed: {violation}"

SERIALIZATION_FAILED = "failed to marshal message"

REQUEST_FAILED = "request failed (url='{url}')"

REQUEST_TIMED_OUT = "request timed out (url='{url}')"

RESPONSE_READ_FAILED = "failed to read response (status {status_code})"

RESPONSE_UNMARSHAL_FAILED = "failed to unmarshal response (status {status_code})"

API_ERROR_WITH_VALIDATION = "sendamatic api error (status {status_code}): {validation_errors} (path: {json_path})"

API_ERROR = "sendamatic api error (status {status_code}): {message}"

REQUEST_BUILD_FAILED = "failed to create request (url='{url}')"

REQUEST_DEADLINE_EXCEEDED = "deadline of {seconds}s exceeded (url='{url}')"
