import logging
import sys
from typing import NoReturn, Optional

import typer
from rich.console import Console

from config import settings
from src.book import Book
from src.errors import LibraryError
from src.library import Library
from src.library_statistics import (
    build_report,
    calculate_average_pages,
    calculate_checked_out_percentage,
)
from src.member import Member
from utils.ui_helpers import (
    print_book_detail,
    print_book_list,
    print_member_detail,
    print_stats_result,
    set_output_mode,
)

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)

# Demo kataloğu: (id, başlık, yazar, yayın yılı, sayfa sayısı)
DEMO_BOOKS = [
    ("B1", "1984", "George Orwell", 1949, 340),
    ("B2", "Brave New World", "Aldous Huxley", 1932, 311),
    ("B3", "The Hobbit", "J.R.R. Tolkien", 1937, 310),
    ("B4", "Animal Farm", "George Orwell", 1945, 112),
    ("B5", "Clean Code", "Robert C. Martin", 2008, 464),
]
DEMO_MEMBERS = [
    ("M1", "Alice", 3),
    ("M2", "Bob", 2),
]


def build_demo_library() -> Library:
    """Bellek içi demo kütüphanesini oluştur ve birkaç ödünç işlemiyle doldur."""
    library = Library()
    for row in DEMO_BOOKS:
        library.add_book(Book(*row))
    for row in DEMO_MEMBERS:
        library.register_member(Member(*row))

    library.checkout_book("B1", "M1")
    library.checkout_book("B2", "M1")
    library.checkout_book("B3", "M2")
    library.return_book("B3", "M2")
    return library


# Süreç boyunca tek bir demo kütüphanesi
class LibraryManager:
    _instance: Optional[Library] = None

    @classmethod
    def get_instance(cls) -> Library:
        """Library örneğini al veya oluştur."""
        if cls._instance is None:
            cls._instance = build_demo_library()
            logger.debug("Demo library initialised")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _fail(error: LibraryError) -> NoReturn:
    print(f"Error: {error}")
    raise typer.Exit(code=1)


# --- Typer CLI Uygulaması ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Çıktı formatı: plain | json | rich (varsayılan: plain)",
    )
):
    """CLI için genel seçenekler (ör. çıktı modu)."""
    _configure_logging()
    if output:
        set_output_mode(output)

@app.command("list")
def cli_list():
    """Tüm kitapları listele."""
    print_book_list(LibraryManager.get_instance().get_all_books())

@app.command("available")
def cli_available():
    """Rafta olan kitapları listele."""
    books = LibraryManager.get_instance().get_available_books()
    print_book_list(books, empty_message="No available books.")

@app.command("checked-out")
def cli_checked_out():
    """Ödünçteki kitapları listele."""
    books = LibraryManager.get_instance().get_checked_out_books()
    print_book_list(books, empty_message="No checked out books.")

@app.command("find")
def cli_find(book_id: str):
    """Kimlik ile bir kitap bul ve detayları göster."""
    book = LibraryManager.get_instance().find_book_by_id(book_id)
    if book:
        print_book_detail(book, settings.current_year)
    else:
        print(f"Book with id {book_id} not found.")

@app.command("search")
def cli_search(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Başlıkta geçen metin"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Yazar adı (tam eşleşme)"),
):
    """Başlığa ve/veya yazara göre ara."""
    if title is None and author is None:
        print("Provide --title and/or --author.")
        raise typer.Exit(code=2)

    lib = LibraryManager.get_instance()
    try:
        if title is not None:
            books = lib.find_books_by_title(title)
            if author is not None:
                by_author = set(lib.find_books_by_author(author))
                books = [b for b in books if b in by_author]
        else:
            books = lib.find_books_by_author(author)
    except LibraryError as e:
        _fail(e)
    print_book_list(books, empty_message="No books match the criteria.")

@app.command("member")
def cli_member(member_id: str):
    """Üye bilgilerini ve ödünç aldığı kitapları göster."""
    lib = LibraryManager.get_instance()
    member = lib.find_member_by_id(member_id)
    if member is None:
        print(f"Member with id {member_id} not found.")
        return
    books = lib.get_books_borrowed_by_member(member_id)
    print_member_detail(member, books, member.is_power_reader(settings.power_reader_threshold))

@app.command("popular")
def cli_popular(
    limit: int = typer.Option(settings.default_popular_limit, "--limit", "-l", help="Gösterilecek maksimum kitap"),
):
    """En çok ödünç alınan kitapları listele."""
    books = LibraryManager.get_instance().get_most_popular_books(limit)
    print_book_list(books, empty_message="No books to rank.", title="🏆 Most Popular")

@app.command("stats")
def cli_stats():
    """Kütüphane istatistiklerini göster."""
    lib = LibraryManager.get_instance()
    stats = build_report(lib.get_all_books())
    stats.update({
        "total_members": lib.get_total_member_count(),
        "total_borrowed": lib.get_total_borrowed_book_count(),
        "active": lib.is_active(),
    })
    print_stats_result(stats)

@app.command("checkout")
def cli_checkout(book_id: str, member_id: str):
    """Bir kitabı üyeye ödünç ver."""
    lib = LibraryManager.get_instance()
    try:
        lib.checkout_book(book_id, member_id)
    except LibraryError as e:
        _fail(e)
    print(f"Book {book_id} checked out to {member_id}.")

@app.command("return")
def cli_return(book_id: str, member_id: str):
    """Üyeden bir kitabı iade al."""
    lib = LibraryManager.get_instance()
    try:
        lib.return_book(book_id, member_id)
    except LibraryError as e:
        _fail(e)
    print(f"Book {book_id} returned by {member_id}.")

@app.command("demo")
def cli_demo():
    """Kütüphane işlemlerini adım adım gösteren kısa bir tur."""
    lib = LibraryManager.get_instance()
    console.rule(f"[bold cyan]{APP_NAME} demo")

    print(f"Total books: {lib.get_total_book_count()}")
    print(f"Total members: {lib.get_total_member_count()}")
    print(f"Total borrowed: {lib.get_total_borrowed_book_count()}")
    print(f"Available books: {len(lib.get_available_books())}")
    print(f"Average pages: {calculate_average_pages(lib.get_all_books())}")
    print(f"Checked out %: {calculate_checked_out_percentage(lib.get_all_books())}")

    try:
        lib.return_book("B2", "M1")
    except LibraryError as e:
        _fail(e)

    member = lib.find_member_by_id("M1")
    print(f"Books borrowed by {member.name}: {len(lib.get_books_borrowed_by_member('M1'))}")
    popular = ", ".join(b.id for b in lib.get_most_popular_books(2))
    print(f"Most popular books: {popular}")


if __name__ == "__main__":
    if len(sys.argv) == 1:
        sys.argv.append("demo")
    app()
