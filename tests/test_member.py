import pytest

from src.errors import StateError, ValidationError
from src.member import Member

def test_constructor_trims_and_starts_empty():
    member = Member(" M1 ", " Alice ", 2)
    assert member.id == "M1"
    assert member.name == "Alice"
    assert member.max_books_allowed == 2
    assert member.borrowed_book_ids == ()
    assert member.borrowed_count == 0

@pytest.mark.parametrize("args", [
    (None, "Alice", 2),
    ("  ", "Alice", 2),
    ("M1", "", 2),
    ("M1", None, 2),
    ("M1", "Alice", 0),
    ("M1", "Alice", -3),
])
def test_constructor_rejects_invalid_input(args):
    with pytest.raises(ValidationError):
        Member(*args)

def test_name_setter():
    member = Member("M1", "Alice", 2)
    member.name = "  Alicia "
    assert member.name == "Alicia"
    with pytest.raises(ValidationError):
        member.name = " "
    assert member.name == "Alicia"

def test_borrow_keeps_order():
    member = Member("M1", "Alice", 3)
    member.borrow_book("B2")
    member.borrow_book("B1")
    assert member.borrowed_book_ids == ("B2", "B1")
    assert member.has_borrowed("B1")
    assert not member.has_borrowed("B3")

def test_borrowed_book_ids_is_a_snapshot():
    member = Member("M1", "Alice", 3)
    member.borrow_book("B1")
    ids = member.borrowed_book_ids
    member.borrow_book("B2")
    assert ids == ("B1",)

def test_borrow_blank_id_raises():
    member = Member("M1", "Alice", 3)
    with pytest.raises(ValidationError):
        member.borrow_book("  ")

def test_borrow_at_capacity_raises_state_error():
    member = Member("M1", "Alice", 1)
    member.borrow_book("B1")
    assert member.is_at_capacity()
    with pytest.raises(StateError):
        member.borrow_book("B2")
    assert member.borrowed_book_ids == ("B1",)

def test_borrow_duplicate_raises_validation_error():
    member = Member("M1", "Alice", 3)
    member.borrow_book("B1")
    with pytest.raises(ValidationError, match="already borrowed"):
        member.borrow_book("B1")
    assert member.borrowed_count == 1

def test_return_book():
    member = Member("M1", "Alice", 3)
    member.borrow_book("B1")
    member.borrow_book("B2")
    member.return_book("B1")
    assert member.borrowed_book_ids == ("B2",)
    with pytest.raises(ValidationError):
        member.return_book("B1")

def test_max_books_allowed_setter():
    member = Member("M1", "Alice", 3)
    member.borrow_book("B1")
    member.borrow_book("B2")

    member.max_books_allowed = 2
    assert member.max_books_allowed == 2
    assert member.is_at_capacity()

    with pytest.raises(ValidationError, match="lower than currently borrowed"):
        member.max_books_allowed = 1
    with pytest.raises(ValidationError):
        member.max_books_allowed = 0
    assert member.max_books_allowed == 2

def test_is_power_reader():
    member = Member("M1", "Alice", 5)
    member.borrow_book("B1")
    member.borrow_book("B2")
    assert member.is_power_reader(2) is True
    assert member.is_power_reader(3) is False
    with pytest.raises(ValidationError):
        member.is_power_reader(0)

def test_equality_uses_id_only():
    assert Member("M1", "Alice", 2) == Member("M1", "Someone Else", 9)
    assert Member("M1", "Alice", 2) != Member("M2", "Alice", 2)
