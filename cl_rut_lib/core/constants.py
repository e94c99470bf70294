import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "CL_RUT_"


# Thousands separator used by the Chilean convention
GROUP_SEPARATOR = "."

# Separator placed between the correlative and the check digit
CHECK_DIGIT_SEPARATOR = "-"

# Digits of a group between two thousands separators
GROUP_SIZE = 3

# Weights cycle used by the modulo 11 algorithm (2, 3, ..., 7, 2, 3, ...)
CHECK_DIGIT_MIN_WEIGHT = 2
CHECK_DIGIT_MAX_WEIGHT = 7

# Check digit returned when ``11 - sum % 11`` equals 10
CHECK_DIGIT_K = "K"

# Range [min, max) of correlatives drawn by the generator
GENERATOR_MIN_CORRELATIVE = 100_000
GENERATOR_MAX_CORRELATIVE = 29_100_000

# Number of RUTs generated when no options are given at all
DEFAULT_GENERATE_COUNT = 30

# Default logging level used by ``prepare_logger``
LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()
