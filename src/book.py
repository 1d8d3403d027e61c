from __future__ import annotations

from src.errors import StateError, ValidationError
from utils.validators import NumberValidator, TextValidator

# Güncellemelerde kabul edilen en erken yayın yılı
MIN_UPDATED_PUBLICATION_YEAR = 1400
CLASSIC_AGE_YEARS = 50


class Book:
    """Kütüphanedeki tek bir kitap öğesini temsil eder.

    Kimlik (`id`) oluşturulduktan sonra değişmez; iki kitap yalnızca kimlikleri
    aynıysa eşittir. Ödünç durumu iki hallidir (rafta / ödünçte) ve yalnızca
    `check_out` ve `check_in` ile değişir.
    """

    def __init__(self, id: str, title: str, author: str, publication_year: int, page_count: int) -> None:
        # Önce tüm alanları doğrula; hatalı girdide nesne yarım kalmasın
        book_id = TextValidator.require_text(id, "id")
        title = TextValidator.require_text(title, "title")
        author = TextValidator.require_text(author, "author")
        publication_year = NumberValidator.require_positive(publication_year, "publication_year")
        page_count = NumberValidator.require_positive(page_count, "page_count")

        self._id = book_id
        self._title = title
        self._author = author
        self._publication_year = publication_year
        self._page_count = page_count
        self._checked_out = False
        self._times_borrowed = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = TextValidator.require_text(value, "title")

    @property
    def author(self) -> str:
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._author = TextValidator.require_text(value, "author")

    @property
    def publication_year(self) -> int:
        return self._publication_year

    @publication_year.setter
    def publication_year(self, value: int) -> None:
        # Kurucu yalnızca > 0 ister; güncellemelerde alt sınır 1400
        self._publication_year = NumberValidator.require_at_least(
            value, MIN_UPDATED_PUBLICATION_YEAR, "publication_year"
        )

    @property
    def page_count(self) -> int:
        return self._page_count

    @page_count.setter
    def page_count(self, value: int) -> None:
        self._page_count = NumberValidator.require_positive(value, "page_count")

    @property
    def checked_out(self) -> bool:
        return self._checked_out

    @property
    def times_borrowed(self) -> int:
        return self._times_borrowed

    # ------------------------- Ödünç durumu ------------------------- #
    def check_out(self) -> None:
        """Kitabı ödünç verilmiş olarak işaretle ve ödünç sayacını artır."""
        if self._checked_out:
            raise StateError(f"Book is already checked out: {self._id}")
        self._checked_out = True
        self._times_borrowed += 1

    def check_in(self) -> None:
        """Kitabı rafa geri al. Ödünç sayacına dokunmaz."""
        if not self._checked_out:
            raise StateError(f"Book is not currently checked out: {self._id}")
        self._checked_out = False

    # ------------------------- Hesaplamalar ------------------------- #
    def is_classic(self, current_year: int) -> bool:
        """Kitap en az 50 yaşındaysa klasik sayılır."""
        if current_year < self._publication_year:
            raise ValidationError("current_year cannot be before publication_year")
        return (current_year - self._publication_year) >= CLASSIC_AGE_YEARS

    def calculate_difficulty_score(self, current_year: int) -> float:
        age = max(0, current_year - self._publication_year)
        return self._page_count * 0.5 + age * 0.1

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "title": self._title,
            "author": self._author,
            "publication_year": self._publication_year,
            "page_count": self._page_count,
            "checked_out": self._checked_out,
            "times_borrowed": self._times_borrowed,
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Book):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self._title} by {self._author} (ID: {self._id})"

    def __repr__(self) -> str:
        return (
            f"Book(id={self._id!r}, title={self._title!r}, author={self._author!r}, "
            f"publication_year={self._publication_year}, page_count={self._page_count}, "
            f"checked_out={self._checked_out}, times_borrowed={self._times_borrowed})"
        )
