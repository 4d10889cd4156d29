"""Books, members and book genres."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Genre(IntEnum):
    """Book genres, numbered as entered at the prompt."""

    FICTION = 0
    NON_FICTION = 1
    SCIENCE = 2
    HISTORY = 3
    FANTASY = 4
    BIOGRAPHY = 5
    OTHER = 6


_GENRE_NAMES = {
    Genre.FICTION: "Ficcion",
    Genre.NON_FICTION: "No Ficcion",
    Genre.SCIENCE: "Ciencia",
    Genre.HISTORY: "Historia",
    Genre.FANTASY: "Fantasia",
    Genre.BIOGRAPHY: "Biografia",
    Genre.OTHER: "Otro",
}

_GENRES_BY_NAME = {name: genre for genre, name in _GENRE_NAMES.items()}


def genre_to_string(genre: int) -> str:
    """Return the display name of a genre, or "Desconocido" for an unknown value."""
    try:
        return _GENRE_NAMES[Genre(genre)]
    except ValueError:
        return "Desconocido"


def genre_from_string(text: str) -> Genre:
    """Return the genre with this display name; any other text gives OTHER."""
    return _GENRES_BY_NAME.get(text, Genre.OTHER)


@dataclass
class Book:
    """A title held by the library, with the number of copies on the shelf."""

    id: int
    title: str
    author: str
    publication_year: int
    genre: int = Genre.OTHER
    quantity: int = 0

    def __post_init__(self) -> None:
        try:
            self.genre = Genre(self.genre)
        except ValueError:
            pass


@dataclass
class Member:
    """A library member and the ids of the books lent to them, in lending order."""

    id: int
    name: str
    issued_books: list[int] = field(default_factory=list)

    @property
    def issued_count(self) -> int:
        """Number of books currently lent to the member."""
        return len(self.issued_books)