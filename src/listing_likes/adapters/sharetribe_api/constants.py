"""Integration API endpoint paths.

API Documentation: https://www.sharetribe.com/api-reference/integration.html
"""

AUTH_TOKEN_PATH = "/v1/auth/token"
EVENTS_QUERY_PATH = "/v1/integration_api/events/query"
LISTINGS_QUERY_PATH = "/v1/integration_api/listings/query"
LISTINGS_UPDATE_PATH = "/v1/integration_api/listings/update"

AUTH_SCOPE = "integ"

# Refresh the access token this many seconds before it expires
TOKEN_EXPIRY_LEEWAY_SECONDS = 30
