import os
import json
from typing import List, Any, Dict, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Geçersiz değerleri yoksay; mevcut varsayılanı koru

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Any], empty_message: str = "No books in library.", title: str = "📚 Books") -> None:
    """Kitap listesini mevcut çıktı moduna göre yazdır.
    - plain: 'ID - Title by Author' satırları, ödünçteyse '[checked out]' eki
    - json: JSON dizisi olarak kitabın tüm alanları
    - rich: Rich tablosu
    """
    mode = get_output_mode()

    if not books:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title, show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Pages", justify="right")
        table.add_column("Borrowed", justify="right")
        table.add_column("Status")
        for b in books:
            status = "[red]checked out[/]" if b.checked_out else "[green]available[/]"
            table.add_row(b.id, b.title, b.author, str(b.publication_year), str(b.page_count),
                          str(b.times_borrowed), status)
        _console.print(table)
    else:
        for b in books:
            suffix = " [checked out]" if b.checked_out else ""
            print(f"{b.id} - {b.title} by {b.author}{suffix}")

def print_book_detail(book: Any, current_year: int) -> None:
    """Tek bir kitabın ayrıntılarını yazdır (klasik/zorluk hesaplarıyla)."""
    mode = get_output_mode()
    # Yıl, yayın yılından önceyse klasik hesabı yapılamaz
    classic: Optional[bool] = book.is_classic(current_year) if current_year >= book.publication_year else None
    difficulty = book.calculate_difficulty_score(current_year)

    if mode == "json":
        payload = book.to_dict()
        payload.update({"is_classic": classic, "difficulty_score": difficulty})
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Title:[/] {book.title}\n"
            f"[bold]Author:[/] {book.author}\n"
            f"[bold]Year:[/] {book.publication_year}\n"
            f"[bold]Pages:[/] {book.page_count}\n"
            f"[bold]Checked out:[/] {'yes' if book.checked_out else 'no'}\n"
            f"[bold]Times borrowed:[/] {book.times_borrowed}\n"
            f"[bold]Classic:[/] {_yes_no(classic)}\n"
            f"[bold]Difficulty:[/] {difficulty:.1f}"
        )
        _console.print(Panel.fit(content, title=f"📖 {book.id}", border_style="blue"))
    else:
        print("Book Found")
        print(f"ID: {book.id}")
        print(f"Title: {book.title}")
        print(f"Author: {book.author}")
        print(f"Year: {book.publication_year}")
        print(f"Pages: {book.page_count}")
        print(f"Checked out: {'yes' if book.checked_out else 'no'}")
        print(f"Times borrowed: {book.times_borrowed}")
        print(f"Classic: {_yes_no(classic)}")
        print(f"Difficulty: {difficulty:.1f}")

def print_member_detail(member: Any, books: List[Any], power_reader: bool) -> None:
    mode = get_output_mode()

    if mode == "json":
        payload = member.to_dict()
        payload.update({"power_reader": power_reader, "borrowed_books": [b.to_dict() for b in books]})
        print(json.dumps(payload, ensure_ascii=False))
        return

    header = (
        f"Member: {member.name} ({member.id})\n"
        f"Borrowed: {member.borrowed_count}/{member.max_books_allowed}\n"
        f"Power reader: {'yes' if power_reader else 'no'}"
    )
    if mode == "rich":
        _console.print(Panel.fit(header, title="👤 Member", border_style="cyan"))
    else:
        print(header)
    print_book_list(books, empty_message="No borrowed books.", title="📚 Borrowed")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Statistikleri mevcut çıktı moduna göre yazdır.
    - plain: her satırda bir 'Etiket: değer'
    - json: JSON nesnesi
    - rich: Ana metriklerle Panel
    """
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    labels = [
        ("total_books", "Total Books"),
        ("total_members", "Total Members"),
        ("total_borrowed", "Total Borrowed"),
        ("total_pages", "Total Pages"),
        ("average_pages", "Average Pages"),
        ("checked_out_percentage", "Checked Out %"),
        ("engagement_score", "Engagement Score"),
        ("most_popular_author", "Most Popular Author"),
        ("active", "Active"),
    ]

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{label}:[/] {_fmt(stats.get(key))}" for key, label in labels if key in stats)
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for key, label in labels:
            if key in stats:
                print(f"{label}: {_fmt(stats[key])}")

def _fmt(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)

def _yes_no(value: Optional[bool]) -> str:
    if value is None:
        return "-"
    return "yes" if value else "no"
