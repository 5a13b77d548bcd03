# Environment variables
ENV_TIMEOUT = "WENETWORKING_TIMEOUT"
ENV_MAX_WORKERS = "WENETWORKING_MAX_WORKERS"
ENV_STRICT_DECODING = "WENETWORKING_STRICT_DECODING"
ENV_DEBUG = "WENETWORKING_DEBUG"

# Defaults
DEFAULT_TIMEOUT = 40.0

# Logging
LOGGER_NAME = "wenetworking"
NO_HEADERS = ">>> No Headers <<<"
NO_BODY = ">>> No Body <<<"
NO_PARSABLE_RESPONSE = ">>> No parsable response <<<"
