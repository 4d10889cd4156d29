"""The library catalogue: books, members, lending and the text files they live in."""

from __future__ import annotations

from collections import deque
from typing import Iterable, TextIO

from biblioteca.memory import MemoryTracker
from biblioteca.models import Book, Member, genre_from_string, genre_to_string

BOOK_RECORD_SIZE = 224
MEMBER_RECORD_SIZE = 128
INT_SIZE = 4
TEXT_LIMIT = 99


class LibraryError(Exception):
    """Base class for library failures."""


class NotFoundError(LibraryError):
    """The book or the member asked for does not exist (or no copy is left)."""

    def __init__(self, message: str = "Libro o miembro no encontrados.") -> None:
        super().__init__(message)


class NotIssuedError(LibraryError):
    """The member does not have the book that is being returned."""

    def __init__(
        self, message: str = "El miembro no tiene este libro prestado."
    ) -> None:
        super().__init__(message)


class _FieldReader:
    """Reads the line-oriented records of the library files."""

    def __init__(self, stream: TextIO) -> None:
        self._lines = deque(line.rstrip("\n") for line in stream)

    def _skip_blank(self) -> None:
        while self._lines and not self._lines[0].strip():
            self._lines.popleft()

    def exhausted(self) -> bool:
        self._skip_blank()
        return not self._lines

    def integer(self, what: str) -> int:
        self._skip_blank()
        if not self._lines:
            raise LibraryError(f"Falta el campo {what}.")
        text = self._lines.popleft()
        try:
            return int(text.strip())
        except ValueError:
            raise LibraryError(f"Valor no valido para {what}: {text!r}") from None

    def text(self, what: str) -> str:
        if not self._lines:
            raise LibraryError(f"Falta el campo {what}.")
        return self._lines.popleft()[:TEXT_LIMIT]


def write_books(books: Iterable[Book], stream: TextIO) -> None:
    """Write books, six lines each, in the order given."""
    for book in books:
        stream.write(
            f"{book.id}\n{book.title}\n{book.author}\n{book.publication_year}\n"
            f"{genre_to_string(book.genre)}\n{book.quantity}\n"
        )


def read_books(stream: TextIO) -> list[Book]:
    """Read the books of a library file, in file order."""
    reader = _FieldReader(stream)
    books = []
    while not reader.exhausted():
        book_id = reader.integer("id")
        title = reader.text("titulo")
        author = reader.text("autor")
        year = reader.integer("ano de publicacion")
        genre = genre_from_string(reader.text("genero"))
        quantity = reader.integer("cantidad")
        books.append(Book(book_id, title, author, year, genre, quantity))
    return books


def write_members(members: Iterable[Member], stream: TextIO) -> None:
    """Write members: id, name, issued count, then one line per issued book."""
    for member in members:
        stream.write(f"{member.id}\n{member.name}\n{member.issued_count}\n")
        for book_id in member.issued_books:
            stream.write(f"{book_id}\n")


def read_members(stream: TextIO) -> list[Member]:
    """Read the members of a members file, in file order."""
    reader = _FieldReader(stream)
    members = []
    while not reader.exhausted():
        member_id = reader.integer("id")
        name = reader.text("nombre")
        count = reader.integer("cantidad de libros prestados")
        if count < 0:
            raise LibraryError(f"Cantidad de libros prestados negativa: {count}")
        issued = [reader.integer("libro prestado") for _ in range(count)]
        members.append(Member(member_id, name, issued))
    return members


class Library:
    """Books and members, newest first, with heap bookkeeping on a tracker."""

    def __init__(self, tracker: MemoryTracker | None = None) -> None:
        self.tracker = tracker if tracker is not None else MemoryTracker()
        self.books: list[Book] = []
        self.members: list[Member] = []

    def add_book(self, book: Book) -> None:
        """Put a book at the front of the catalogue."""
        self.books.insert(0, book)
        self.tracker.record_allocation(book, BOOK_RECORD_SIZE)

    def find_book(self, book_id: int) -> Book | None:
        """Return the first book with this id, or None."""
        return next((book for book in self.books if book.id == book_id), None)

    def add_member(self, member: Member) -> None:
        """Put a member at the front of the member list."""
        self.members.insert(0, member)
        self.tracker.record_allocation(member, MEMBER_RECORD_SIZE)

    def find_member(self, member_id: int) -> Member | None:
        """Return the first member with this id, or None."""
        return next(
            (member for member in self.members if member.id == member_id), None
        )

    def issue_book(self, member_id: int, book_id: int) -> Member:
        """Lend a copy of a book to a member and return the member.

        Raises NotFoundError if the member is unknown or no book with this id
        has a copy left.
        """
        book = next(
            (b for b in self.books if b.id == book_id and b.quantity > 0), None
        )
        member = self.find_member(member_id)
        if book is None or member is None:
            raise NotFoundError()
        book.quantity -= 1
        member.issued_books.append(book_id)
        self.tracker.record_allocation(
            member.issued_books, member.issued_count * INT_SIZE
        )
        return member

    def return_book(self, member_id: int, book_id: int) -> Member:
        """Take a lent book back from a member and return the member.

        Raises NotFoundError if the book or member is unknown, and
        NotIssuedError if the member does not have the book.
        """
        book = self.find_book(book_id)
        member = self.find_member(member_id)
        if book is None or member is None:
            raise NotFoundError()
        if book_id not in member.issued_books:
            raise NotIssuedError()
        member.issued_books.remove(book_id)
        self.tracker.record_allocation(
            member.issued_books, member.issued_count * INT_SIZE
        )
        book.quantity += 1
        return member

    def save_books(self, path: str) -> None:
        """Write the catalogue to a file."""
        with open(path, "w", encoding="utf-8") as stream:
            write_books(self.books, stream)

    def load_books(self, path: str) -> int:
        """Add the books of a file, each to the front, and return how many."""
        with open(path, encoding="utf-8") as stream:
            books = read_books(stream)
        for book in books:
            self.add_book(book)
        return len(books)

    def save_members(self, path: str) -> None:
        """Write the members to a file."""
        with open(path, "w", encoding="utf-8") as stream:
            write_members(self.members, stream)

    def load_members(self, path: str) -> int:
        """Add the members of a file, each to the front, and return how many."""
        with open(path, encoding="utf-8") as stream:
            members = read_members(stream)
        for member in members:
            self.add_member(member)
            self.tracker.record_allocation(
                member.issued_books, member.issued_count * INT_SIZE
            )
        return len(members)

    def release(self) -> None:
        """Drop every book and member, recording each release."""
        for book in self.books:
            self.tracker.record_deallocation(book)
        self.books.clear()
        for member in self.members:
            self.tracker.record_deallocation(member.issued_books)
            self.tracker.record_deallocation(member)
        self.members.clear()