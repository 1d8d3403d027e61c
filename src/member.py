from __future__ import annotations

from typing import List, Tuple

from src.errors import StateError, ValidationError
from utils.validators import NumberValidator, TextValidator


class Member:
    """Kütüphaneden kitap ödünç alabilen bir üyeyi temsil eder.

    Üye, ödünç aldığı kitapları nesne olarak değil kimlik olarak tutar;
    kimlikler `Library` üzerinden kitaplara çözülür.
    """

    def __init__(self, id: str, name: str, max_books_allowed: int) -> None:
        member_id = TextValidator.require_text(id, "id")
        name = TextValidator.require_text(name, "name")
        max_books_allowed = NumberValidator.require_positive(max_books_allowed, "max_books_allowed")

        self._id = member_id
        self._name = name
        self._max_books_allowed = max_books_allowed
        self._borrowed_book_ids: List[str] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = TextValidator.require_text(value, "name")

    @property
    def max_books_allowed(self) -> int:
        return self._max_books_allowed

    @max_books_allowed.setter
    def max_books_allowed(self, value: int) -> None:
        value = NumberValidator.require_positive(value, "max_books_allowed")
        if value < len(self._borrowed_book_ids):
            raise ValidationError("New limit is lower than currently borrowed books")
        self._max_books_allowed = value

    @property
    def borrowed_book_ids(self) -> Tuple[str, ...]:
        """Ödünç alınan kitap kimlikleri, ödünç alma sırasıyla (salt okunur)."""
        return tuple(self._borrowed_book_ids)

    @property
    def borrowed_count(self) -> int:
        return len(self._borrowed_book_ids)

    def has_borrowed(self, book_id: str) -> bool:
        return book_id in self._borrowed_book_ids

    def borrow_book(self, book_id: str) -> None:
        """Üyenin bir kitabı ödünç aldığını kaydet."""
        if TextValidator.is_blank(book_id):
            raise ValidationError("book_id must not be null or blank")
        if self.is_at_capacity():
            raise StateError(f"Member has reached max_books_allowed: {self._id}")
        if book_id in self._borrowed_book_ids:
            raise ValidationError(f"Member already borrowed this book: {book_id}")
        self._borrowed_book_ids.append(book_id)

    def return_book(self, book_id: str) -> None:
        if book_id not in self._borrowed_book_ids:
            raise ValidationError(f"Member did not borrow book: {book_id}")
        self._borrowed_book_ids.remove(book_id)

    def is_at_capacity(self) -> bool:
        return len(self._borrowed_book_ids) >= self._max_books_allowed

    def is_power_reader(self, threshold: int) -> bool:
        """Üye aynı anda en az `threshold` kitap ödünç almışsa True."""
        threshold = NumberValidator.require_positive(threshold, "threshold")
        return len(self._borrowed_book_ids) >= threshold

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "max_books_allowed": self._max_books_allowed,
            "borrowed_book_ids": list(self._borrowed_book_ids),
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Member):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Member(id={self._id!r}, name={self._name!r}, "
            f"max_books_allowed={self._max_books_allowed}, "
            f"borrowed_book_ids={self._borrowed_book_ids!r})"
        )
