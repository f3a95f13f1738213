# Environment variables
ENV_BASE_URL = "SIMPLE_CLIENT_BASE_URL"
ENV_DEBUG = "SIMPLE_CLIENT_DEBUG"

# Headers
HEADER_PRAGMA = "pragma"
HEADER_CACHE_CONTROL = "cache-control"
HEADER_REQUEST_ID = "request-id"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded;charset=UTF-8"

# Defaults
DEFAULT_EXPECTED_STATUS = 200
LOGGER_NAME = "simple_client"
