# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"

# Environment variables
ENV_DISABLE_SSL_VERIFY = "JSONREQUEST_DISABLE_SSL_VERIFY"

# Client defaults
DEFAULT_TIMEOUT = 30.0
STREAM_CHUNK_SIZE = 64 * 1024
