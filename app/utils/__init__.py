"""
Utils package initialization.
"""
from app.utils.date_utils import (
    calculate_age,
    parse_date_string,
)
from app.utils.validators import (
    clean_text,
    clean_fields,
    require,
    check_length,
    check_choice,
    parse_flag,
)
from app.utils.constants import (
    SEX_CHOICES,
    RELATION_CHOICES,
    MAX_LENGTHS,
)
from app.utils.db_errors import is_missing_table_error

__all__ = [
    "calculate_age",
    "parse_date_string",
    "clean_text",
    "clean_fields",
    "require",
    "check_length",
    "check_choice",
    "parse_flag",
    "SEX_CHOICES",
    "RELATION_CHOICES",
    "MAX_LENGTHS",
    "is_missing_table_error",
]
