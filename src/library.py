from __future__ import annotations

import logging
from typing import Dict, List, Optional

from src.book import Book
from src.errors import StateError, ValidationError
from src.member import Member

logger = logging.getLogger(__name__)


class Library:
    """Kitap ve üye koleksiyonlarını bellekte yönetir.

    Kitaplar ve üyeler kimliklerine göre tutulur. Ödünç verme ve iade işlemleri
    kitap ile üye arasındaki tutarlılığı korur: ödünçteki her kitap tam olarak
    bir üyenin ödünç listesinde yer alır.
    """

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._members: Dict[str, Member] = {}

    # ------------------------- Kitaplar ------------------------- #
    def add_book(self, book: Book) -> None:
        """Önceden oluşturulmuş bir Kitap ekleyin. Kimliğe göre kopyaları önleyin."""
        if book is None:
            raise ValidationError("book must not be null")
        if book.id in self._books:
            raise ValidationError(f"Book with id {book.id} already exists")
        self._books[book.id] = book
        logger.info(f"Book added: {book.id} ({book.title})")

    def remove_book(self, book_id: str) -> bool:
        book = self._books.get(book_id)
        if book is None:
            return False
        if book.checked_out:
            raise StateError("Cannot remove a book that is checked out")
        del self._books[book_id]
        logger.info(f"Book removed: {book_id}")
        return True

    def find_book_by_id(self, book_id: str) -> Optional[Book]:
        return self._books.get(book_id)

    def get_all_books(self) -> List[Book]:
        """Tüm kitapların anlık listesi; listeyi değiştirmek kütüphaneyi etkilemez."""
        return list(self._books.values())

    def find_books_by_title(self, query: str) -> List[Book]:
        """Başlığında sorguyu içeren kitaplar (büyük/küçük harf duyarsız)."""
        if query is None:
            raise ValidationError("query must not be null")
        needle = query.casefold()
        return [b for b in self._books.values() if needle in b.title.casefold()]

    def find_books_by_author(self, author: str) -> List[Book]:
        """Yazarı tam olarak eşleşen kitaplar (büyük/küçük harf duyarsız)."""
        if author is None:
            raise ValidationError("author must not be null")
        wanted = author.casefold()
        return [b for b in self._books.values() if b.author.casefold() == wanted]

    def get_available_books(self) -> List[Book]:
        return [b for b in self._books.values() if not b.checked_out]

    def get_checked_out_books(self) -> List[Book]:
        return [b for b in self._books.values() if b.checked_out]

    # ------------------------- Üyeler ------------------------- #
    def register_member(self, member: Member) -> None:
        if member is None:
            raise ValidationError("member must not be null")
        if member.id in self._members:
            raise ValidationError(f"Member with id {member.id} already exists")
        self._members[member.id] = member
        logger.info(f"Member registered: {member.id} ({member.name})")

    def unregister_member(self, member_id: str) -> bool:
        """Üyeyi kaldır. Elinde ödünç kitap olan üye kaldırılamaz."""
        member = self._members.get(member_id)
        if member is None:
            return False
        if member.borrowed_count > 0:
            raise StateError("Cannot unregister a member with borrowed books")
        del self._members[member_id]
        logger.info(f"Member unregistered: {member_id}")
        return True

    def find_member_by_id(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def get_all_members(self) -> List[Member]:
        return list(self._members.values())

    # ------------------------- Ödünç işlemleri ------------------------- #
    def checkout_book(self, book_id: str, member_id: str) -> None:
        """Bir kitabı üyeye ödünç ver.

        Tüm kontroller herhangi bir değişiklikten önce yapılır; bu nedenle
        kitap ve üye güncellemeleri ya birlikte gerçekleşir ya hiç gerçekleşmez.

        Raises:
            ValidationError: Kitap veya üye bulunamazsa.
            StateError: Kitap zaten ödünçteyse veya üye kapasitesini doldurduysa.
        """
        book = self._require_book(book_id)
        member = self._require_member(member_id)
        if book.checked_out:
            raise StateError(f"Book is already checked out: {book_id}")
        if member.is_at_capacity():
            raise StateError(f"Member is at capacity: {member_id}")

        book.check_out()
        member.borrow_book(book_id)
        logger.info(f"Checkout successful: book={book_id} member={member_id}")

    def return_book(self, book_id: str, member_id: str) -> None:
        """Üyenin ödünç aldığı kitabı iade al.

        Raises:
            ValidationError: Kitap/üye bulunamazsa veya üye bu kitabı ödünç almadıysa.
        """
        book = self._require_book(book_id)
        member = self._require_member(member_id)
        if not member.has_borrowed(book_id):
            raise ValidationError(f"Member did not borrow book: {book_id}")

        book.check_in()
        member.return_book(book_id)
        logger.info(f"Return successful: book={book_id} member={member_id}")

    def get_books_borrowed_by_member(self, member_id: str) -> List[Book]:
        member = self._require_member(member_id)
        # Kütüphanede karşılığı olmayan kimlikler atlanır
        return [self._books[bid] for bid in member.borrowed_book_ids if bid in self._books]

    # ------------------------- Raporlama ------------------------- #
    def get_most_popular_books(self, limit: int) -> List[Book]:
        """En çok ödünç alınan kitaplar, azalan sırada; eşitlikte ekleme sırası korunur."""
        if limit <= 0:
            return []
        ranked = sorted(self._books.values(), key=lambda b: b.times_borrowed, reverse=True)
        return ranked[:limit]

    def get_total_book_count(self) -> int:
        return len(self._books)

    def get_total_member_count(self) -> int:
        return len(self._members)

    def get_total_borrowed_book_count(self) -> int:
        return sum(m.borrowed_count for m in self._members.values())

    def is_active(self) -> bool:
        return bool(self._books) and bool(self._members) and self.get_total_borrowed_book_count() > 0

    # ------------------------- Yardımcılar ------------------------- #
    def _require_book(self, book_id: str) -> Book:
        book = self._books.get(book_id)
        if book is None:
            raise ValidationError(f"No such book: {book_id}")
        return book

    def _require_member(self, member_id: str) -> Member:
        member = self._members.get(member_id)
        if member is None:
            raise ValidationError(f"No such member: {member_id}")
        return member
