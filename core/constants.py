"""Constants used throughout the event review service application."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # Log requests slower than 1 second

# Security Headers
SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

# Collections
EVENTS_COLLECTION = "events"
USERS_COLLECTION = "users"
COUNTERS_COLLECTION = "counters"
USER_ID_COUNTER = "users"

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

# Reports
DEFAULT_TOP_EVENTS_LIMIT = 10
TRENDING_WINDOW_DAYS = 30
USER_BEST_EVENTS_LIMIT = 3
MOST_ACTIVE_USERS_LIMIT = 5
FIVE_STAR_RATING = 5
SCORE_DECIMAL_PLACES = 2

# Validation bounds
MIN_RATING = 0
MAX_RATING = 5
MIN_AGE = 0
MAX_AGE = 150
