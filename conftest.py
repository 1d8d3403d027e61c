import pytest

from src.book import Book
from src.library import Library
from src.member import Member

@pytest.fixture
def lib():
    # Her test için boş, bağımsız bir kütüphane
    return Library()

@pytest.fixture
def stocked_lib(lib):
    lib.add_book(Book("B1", "1984", "George Orwell", 1949, 340))
    lib.add_book(Book("B2", "Brave New World", "Aldous Huxley", 1932, 311))
    lib.add_book(Book("B3", "Animal Farm", "George Orwell", 1945, 112))
    lib.add_book(Book("B4", "The Hobbit", "J.R.R. Tolkien", 1937, 310))
    lib.register_member(Member("M1", "Alice", 2))
    lib.register_member(Member("M2", "Bob", 3))
    return lib
