"""Internal constants shared across the library."""

BASE_URL = "http://localhost:8000/api"
USER_AGENT = "pycars/1"
CARS_ENDPOINT = "/cars"

# Key under which the reference backend returns field-level validation failures.
ERRORS_KEY = "errors"
# Key used for a generic (non field-level) write failure message.
DETAIL_KEY = "detail"
