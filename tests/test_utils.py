"""Unit tests for the helper modules."""
import os
from datetime import date, datetime

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from app.config import settings
from app.exceptions import ValidationError
from app.utils.date_utils import calculate_age, parse_date_string
from app.utils.db_errors import is_missing_table_error
from app.utils.uploads import build_stored_name, delete_upload, sanitize_filename
from app.utils.validators import check_choice, check_length, clean_text, parse_flag, require


class TestCalculateAge:

    def test_birthday_not_yet_reached(self):
        assert calculate_age(date(2000, 5, 15), today=date(2024, 5, 14)) == 23

    def test_on_birthday(self):
        assert calculate_age(date(2000, 5, 15), today=date(2024, 5, 15)) == 24

    def test_leap_day_birthday(self):
        assert calculate_age(date(2000, 2, 29), today=date(2023, 2, 28)) == 22
        assert calculate_age(date(2000, 2, 29), today=date(2023, 3, 1)) == 23

    def test_none(self):
        assert calculate_age(None) is None

    def test_datetime_input(self):
        assert calculate_age(datetime(1990, 1, 1, 8, 30), today=date(2020, 1, 1)) == 30


class TestParseDateString:

    @pytest.mark.parametrize("value", ["2024-03-05", "2024-03-05T00:00:00", "2024-03-05T00:00:00.000Z", "03/05/2024"])
    def test_formats(self, value):
        assert parse_date_string(value) == date(2024, 3, 5)

    def test_blank_and_garbage(self):
        assert parse_date_string("  ") is None
        assert parse_date_string("yesterday") is None


class TestValidators:

    def test_clean_text(self):
        assert clean_text("  Juan ") == "Juan"
        assert clean_text("   ") is None
        assert clean_text(None) is None

    def test_require_lists_all_fields(self):
        with pytest.raises(ValidationError) as exc:
            require({"last_name": "Cruz"}, ("last_name", "first_name", "sex"))
        assert exc.value.message == "last_name, first_name, and sex are required."

    def test_require_single_field(self):
        with pytest.raises(ValidationError) as exc:
            require({}, ("action",))
        assert exc.value.message == "action is required."

    def test_require_passes(self):
        require({"a": "x", "b": 0}, ("a", "b"))

    def test_check_length(self):
        assert check_length("contact_no", "0917") == "0917"
        with pytest.raises(ValidationError) as exc:
            check_length("contact_no", "9" * 51)
        assert exc.value.message == "Contact number must be 50 characters or less."

    def test_check_choice(self):
        assert check_choice("sex", None, ["Male"]) is None
        with pytest.raises(ValidationError) as exc:
            check_choice("sex", "Unknown", ["Male", "Female", "Other"])
        assert exc.value.message == "sex must be one of: Male, Female, Other"

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("true", True), ("on", True), (True, True), (1, True),
        ("0", False), ("false", False), ("", False), (None, False),
    ])
    def test_parse_flag(self, value, expected):
        assert parse_flag(value) is expected


class TestMissingTableDetection:

    def test_sqlite_message(self):
        error = OperationalError("SELECT 1", {}, Exception("no such table: history_logs"))
        assert is_missing_table_error(error)

    def test_mysql_error_code(self):
        error = ProgrammingError("SELECT 1", {}, Exception(1146, "Table 'barangay.history_logs' doesn't exist"))
        assert is_missing_table_error(error)

    def test_other_errors(self):
        error = OperationalError("SELECT 1", {}, Exception("database is locked"))
        assert not is_missing_table_error(error)
        assert not is_missing_table_error(ValueError("boom"))


class TestUploadNames:

    def test_sanitize_strips_directories_and_symbols(self):
        assert sanitize_filename("../../etc/passwd") == "passwd"
        assert sanitize_filename("C:\\Users\\me\\my sig!.png") == "my_sig.png"
        assert sanitize_filename("") == "file"

    def test_stored_name_is_timestamped(self):
        assert build_stored_name("photo.JPG", timestamp_ms=1700000000000) == "1700000000000-photo.JPG"


class TestDeleteUpload:

    def test_removes_stored_file(self):
        directory = os.path.join(settings.UPLOAD_DIR, "pictures")
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, "1700000000000-old.jpg")
        with open(path, "wb") as f:
            f.write(b"old")

        delete_upload("/uploads/pictures/1700000000000-old.jpg")

        assert not os.path.exists(path)

    def test_ignores_missing_and_foreign_paths(self):
        delete_upload(None)
        delete_upload("/uploads/pictures/does-not-exist.jpg")
        delete_upload("/etc/passwd")
        delete_upload("/uploads/pictures/../../secret")
