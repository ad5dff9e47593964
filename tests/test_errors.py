"""Tests for the exception hierarchy."""

from rentbook.core.errors import (
    DuplicatePaymentError,
    InvalidReferenceError,
    RentbookError,
    RoomHouseMismatchError,
    StoreFault,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_rentbook_error_is_exception(self) -> None:
        assert isinstance(RentbookError("test"), Exception)

    def test_store_fault_is_rentbook_error(self) -> None:
        assert isinstance(StoreFault("test"), RentbookError)

    def test_room_mismatch_is_invalid_reference(self) -> None:
        err = RoomHouseMismatchError("test")
        assert isinstance(err, InvalidReferenceError)
        assert isinstance(err, RentbookError)

    def test_duplicate_payment_is_rentbook_error(self) -> None:
        assert isinstance(DuplicatePaymentError("test"), RentbookError)

    def test_exception_message(self) -> None:
        err = RoomHouseMismatchError("Room 3 belongs to house 2, not house 1")
        assert str(err) == "Room 3 belongs to house 2, not house 1"
