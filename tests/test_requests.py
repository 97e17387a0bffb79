"""
Request Validation Tests
"""

from collections import OrderedDict

import pytest

from rentomatic.application.requests.request import InvalidRequest, RequestError
from rentomatic.application.requests.room_detail_request import (
    RoomDetailValidRequest,
    build_room_detail_request,
)
from rentomatic.application.requests.room_list_request import (
    RoomListValidRequest,
    build_room_list_request,
)
from rentomatic.domain.value_objects.filter_clause import (
    FilterAttribute,
    FilterGrammar,
    FilterOperator,
    coerce_int,
)


class TestRoomListRequest:
    """Test building room list requests"""

    def test_without_filters(self):
        """Absent filters give a valid request with no filters"""
        request = build_room_list_request()

        assert request.is_valid() is True
        assert request.filters is None

    def test_with_empty_filters(self):
        """An empty mapping is valid and passed on as is"""
        request = build_room_list_request(filters={})

        assert request.is_valid() is True
        assert request.filters == {}

    @pytest.mark.parametrize("key", ["code__eq", "price__eq", "price__lt", "price__gt"])
    def test_accepted_filters(self, key):
        """Every accepted key yields a valid request with unchanged filters"""
        filters = {key: 1}
        request = build_room_list_request(filters=filters)

        assert isinstance(request, RoomListValidRequest)
        assert request.is_valid() is True
        assert request.filters == filters
        assert request.filters is filters

    def test_rejected_filter_key(self):
        """An unknown key makes the request invalid"""
        request = build_room_list_request(filters={"a": 1})

        assert request.is_valid() is False
        assert request.errors == (RequestError("filters", "Key a cannot be used"),)

    def test_every_rejected_key_is_reported_in_order(self):
        """All bad keys are collected, not only the first"""
        filters = OrderedDict(
            [("size__eq", 1), ("price__lt", 10), ("code__gt", "x"), ("price__le", 3)]
        )
        request = build_room_list_request(filters=filters)

        assert request.is_valid() is False
        assert [error.message for error in request.errors] == [
            "Key size__eq cannot be used",
            "Key code__gt cannot be used",
            "Key price__le cannot be used",
        ]
        assert all(error.parameter == "filters" for error in request.errors)

    @pytest.mark.parametrize("filters", [5, "price__lt=5", [("price__lt", 5)]])
    def test_non_mapping_filters(self, filters):
        """Filters that are not a mapping give exactly one error"""
        request = build_room_list_request(filters=filters)

        assert request.is_valid() is False
        assert request.errors == (RequestError("filters", "Is not iterable"),)

    def test_request_has_no_implicit_truthiness(self):
        """Validity is queried explicitly, not through bool()"""
        assert bool(build_room_list_request(filters={"a": 1})) is True
        assert build_room_list_request(filters={"a": 1}).is_valid() is False

    def test_non_coercible_value_is_accepted_by_default(self):
        """Value shape is left to the repository unless strict mode is on"""
        request = build_room_list_request(filters={"price__lt": "cheap"})

        assert request.is_valid() is True

    def test_strict_values_rejects_non_coercible_value(self):
        """Strict mode reports bad values as parameter errors"""
        request = build_room_list_request(
            filters={"price__lt": "cheap", "code__eq": "abc", "size__eq": 1},
            strict_values=True,
        )

        assert request.is_valid() is False
        assert [error.message for error in request.errors] == [
            "Value 'cheap' for key price__lt is not valid",
            "Key size__eq cannot be used",
        ]

    def test_strict_values_rejects_out_of_range_price(self):
        """Prices beyond the 64-bit range are parameter errors in strict mode"""
        request = build_room_list_request(
            filters={"price__lt": "99999999999999999999"}, strict_values=True
        )

        assert request.is_valid() is False
        assert [error.message for error in request.errors] == [
            "Value '99999999999999999999' for key price__lt is not valid",
        ]

    def test_strict_values_accepts_numeric_strings(self):
        """Strict mode still accepts string encoded numbers"""
        request = build_room_list_request(
            filters={"price__gt": "48"}, strict_values=True
        )

        assert request.is_valid() is True

    def test_injected_grammar(self):
        """A different grammar changes the allow-list without global state"""
        grammar = FilterGrammar.from_attributes(
            [FilterAttribute("size", frozenset({FilterOperator.LT}), coerce_int)]
        )

        assert build_room_list_request({"size__lt": 3}, grammar=grammar).is_valid()
        assert not build_room_list_request({"price__lt": 3}, grammar=grammar).is_valid()


class TestInvalidRequest:
    """Test invalid request invariants"""

    def test_invalid_request_needs_errors(self):
        """An invalid request always carries at least one error"""
        with pytest.raises(ValueError):
            InvalidRequest(())

    def test_invalid_request_from_errors(self):
        """Errors are frozen into a tuple"""
        request = InvalidRequest.from_errors([RequestError("filters", "Is not iterable")])

        assert request.errors == (RequestError("filters", "Is not iterable"),)
        assert str(request.errors[0]) == "filters: Is not iterable"


class TestRoomDetailRequest:
    """Test building room detail requests"""

    def test_valid_code(self):
        """A non-empty string code is valid"""
        request = build_room_detail_request("abc")

        assert request == RoomDetailValidRequest(code="abc")
        assert request.is_valid() is True

    @pytest.mark.parametrize("code", [None, ""])
    def test_missing_code(self, code):
        """Missing codes are rejected"""
        request = build_room_detail_request(code)

        assert request.is_valid() is False
        assert request.errors == (RequestError("code", "Is required"),)

    def test_non_string_code(self):
        """Codes must be strings"""
        request = build_room_detail_request(42)

        assert request.errors == (RequestError("code", "Must be a string"),)
