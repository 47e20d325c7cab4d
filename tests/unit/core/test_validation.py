"""Unit tests for request validation."""

import pytest

from src.contact_api.core.errors import RequestValidationFailed
from src.contact_api.core.models import (
    AddressRequest,
    ContactRequest,
    SearchContactRequest,
)
from src.contact_api.core.validation import validate


def _fields(exc_info: pytest.ExceptionInfo[RequestValidationFailed]) -> set[str]:
    return {error["field"] for error in exc_info.value.errors}


class TestContactRequest:
    """Test contact body validation."""

    def test_valid_full_payload(self):
        request = validate(
            ContactRequest,
            {
                "first_name": "Ilham",
                "last_name": "Rh",
                "email": "ilham@example.com",
                "phone": "06886945",
            },
        )

        assert request.first_name == "Ilham"
        assert request.last_name == "Rh"
        assert request.email == "ilham@example.com"
        assert request.phone == "06886945"

    def test_only_first_name_required(self):
        request = validate(ContactRequest, {"first_name": "Ilham"})

        assert request.last_name is None
        assert request.email is None
        assert request.phone is None

    def test_blank_optionals_become_none(self):
        request = validate(
            ContactRequest,
            {"first_name": "Ilham", "last_name": "", "email": "  ", "phone": ""},
        )

        assert request.last_name is None
        assert request.email is None
        assert request.phone is None

    def test_reports_every_invalid_field(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(
                ContactRequest,
                {
                    "first_name": "",
                    "last_name": "",
                    "email": "ilham",
                    "phone": "06886945068869450688694506886945",
                },
            )

        assert _fields(exc_info) == {"first_name", "email", "phone"}
        assert exc_info.value.status_code == 400
        assert all(error["message"] for error in exc_info.value.errors)

    def test_missing_first_name(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, {"last_name": "Rh"})

        assert _fields(exc_info) == {"first_name"}

    def test_whitespace_first_name_rejected(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, {"first_name": "   "})

        assert _fields(exc_info) == {"first_name"}

    def test_first_name_length_bound(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, {"first_name": "a" * 101})

        assert _fields(exc_info) == {"first_name"}

    def test_email_length_bound(self):
        email = "a" * 95 + "@example.com"

        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, {"first_name": "Ilham", "email": email})

        assert _fields(exc_info) == {"email"}

    def test_email_kept_as_given(self):
        request = validate(ContactRequest, {"first_name": "Ilham", "email": "Ilham@EXAMPLE.COM"})

        assert request.email == "Ilham@EXAMPLE.COM"

    def test_email_with_display_name_rejected(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(
                ContactRequest,
                {"first_name": "Bob", "email": "Bob Smith <bob@example.com>"},
            )

        assert _fields(exc_info) == {"email"}

    def test_non_string_first_name_rejected(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, {"first_name": 42})

        assert _fields(exc_info) == {"first_name"}

    def test_non_object_body_rejected(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, ["first_name"])

        assert _fields(exc_info) == {"body"}

    def test_missing_body_reports_required_fields(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(ContactRequest, None)

        assert _fields(exc_info) == {"first_name"}


class TestAddressRequest:
    """Test address body validation."""

    def test_valid_payload(self):
        request = validate(
            AddressRequest,
            {
                "street": "Jalan Merdeka 1",
                "city": "Semarang",
                "province": "Jawa Tengah",
                "country": "Indonesia",
                "postal_code": "11111",
            },
        )

        assert request.country == "Indonesia"
        assert request.postal_code == "11111"

    def test_country_and_postal_code_required(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(
                AddressRequest,
                {"street": "Jalan", "city": "Semarang", "country": "", "postal_code": ""},
            )

        assert _fields(exc_info) == {"country", "postal_code"}

    def test_postal_code_length_bound(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(
                AddressRequest, {"country": "Indonesia", "postal_code": "12345678901"}
            )

        assert _fields(exc_info) == {"postal_code"}


class TestSearchContactRequest:
    """Test search query validation."""

    def test_defaults(self):
        request = validate(SearchContactRequest, {})

        assert request.page == 1
        assert request.size is None
        assert request.name is None

    def test_numeric_strings_are_parsed(self):
        request = validate(SearchContactRequest, {"page": "2", "size": "5"})

        assert request.page == 2
        assert request.size == 5

    def test_blank_filters_are_ignored(self):
        request = validate(SearchContactRequest, {"name": "", "email": " "})

        assert request.name is None
        assert request.email is None

    @pytest.mark.parametrize(
        ("params", "field"),
        [
            ({"page": "0"}, "page"),
            ({"size": "0"}, "size"),
            ({"page": "abc"}, "page"),
            ({"size": "-1"}, "size"),
        ],
    )
    def test_rejects_bad_paging(self, params, field):
        with pytest.raises(RequestValidationFailed) as exc_info:
            validate(SearchContactRequest, params)

        assert _fields(exc_info) == {field}
