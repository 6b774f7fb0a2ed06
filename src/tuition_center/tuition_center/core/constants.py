"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

VIETQR_IMAGE_BASE_URL = "https://img.vietqr.io/image"
VIETQR_TEMPLATE = "compact2"

# Marker appended to transfer references so the center can spot tuition payments.
TUITION_FEE_TAG = "HP"

CURRENCY_SUFFIX = "₫"
DEFAULT_HIGH_DEBT_LIMIT = 5
DEFAULT_CSV_ENCODING = "utf-8-sig"
