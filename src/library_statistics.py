"""Kitap koleksiyonları üzerinde durumsuz istatistik fonksiyonları.

Tüm fonksiyonlar çağıranın verdiği anlık kopya üzerinde çalışır ve hiçbir
şeyi değiştirmez. Koleksiyondaki ``None`` girdileri sessizce atlanır.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from src.book import Book


def _present(books: Optional[Iterable[Optional[Book]]]) -> List[Book]:
    if books is None:
        return []
    return [b for b in books if b is not None]


def count_total_pages(books: Optional[Iterable[Optional[Book]]]) -> int:
    return sum(b.page_count for b in _present(books))


def calculate_average_pages(books: Optional[Iterable[Optional[Book]]]) -> float:
    present = _present(books)
    if not present:
        return 0.0
    return sum(b.page_count for b in present) / len(present)


def find_most_popular_author(books: Optional[Iterable[Optional[Book]]]) -> Optional[str]:
    """Kitapları toplamda en çok ödünç alınan yazar.

    Eşitlik durumunda koleksiyonda ilk karşılaşılan yazar kazanır.
    Hiç kitap yoksa None döner.
    """
    borrow_count_by_author: Dict[str, int] = {}
    for book in _present(books):
        borrow_count_by_author[book.author] = borrow_count_by_author.get(book.author, 0) + book.times_borrowed

    best_author: Optional[str] = None
    best = -1
    for author, count in borrow_count_by_author.items():
        if count > best:
            best = count
            best_author = author
    return best_author


def calculate_checked_out_percentage(books: Optional[Iterable[Optional[Book]]]) -> float:
    present = _present(books)
    if not present:
        return 0.0
    checked_out = sum(1 for b in present if b.checked_out)
    return checked_out * 100.0 / len(present)


def calculate_engagement_score(books: Optional[Iterable[Optional[Book]]]) -> float:
    """Kitap başına ortalama ödünç alınma sayısı."""
    present = _present(books)
    if not present:
        return 0.0
    return sum(b.times_borrowed for b in present) / len(present)


def build_report(books: Optional[Iterable[Optional[Book]]]) -> Dict[str, Any]:
    """Tüm istatistikleri tek bir sözlükte topla (görüntüleme için)."""
    present = _present(books)
    return {
        "total_books": len(present),
        "total_pages": count_total_pages(present),
        "average_pages": calculate_average_pages(present),
        "checked_out_percentage": calculate_checked_out_percentage(present),
        "engagement_score": calculate_engagement_score(present),
        "most_popular_author": find_most_popular_author(present),
    }
