"""Application-wide constants."""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_PERMISSION_NAME_LENGTH = 100
MAX_PERMISSION_CATEGORY_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 255
MAX_ROLE_LENGTH = 20

# Pagination defaults
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
