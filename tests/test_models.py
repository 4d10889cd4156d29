import pytest

from biblioteca.models import Book, Genre, Member, genre_from_string, genre_to_string


@pytest.mark.parametrize(
    "genre, name",
    [
        (Genre.FICTION, "Ficcion"),
        (Genre.NON_FICTION, "No Ficcion"),
        (Genre.SCIENCE, "Ciencia"),
        (Genre.HISTORY, "Historia"),
        (Genre.FANTASY, "Fantasia"),
        (Genre.BIOGRAPHY, "Biografia"),
        (Genre.OTHER, "Otro"),
    ],
)
def test_genre_names(genre, name):
    assert genre_to_string(genre) == name
    assert genre_from_string(name) is genre


def test_genre_numbers_follow_prompt_order():
    expected = [
        "Ficcion",
        "No Ficcion",
        "Ciencia",
        "Historia",
        "Fantasia",
        "Biografia",
        "Otro",
    ]
    assert [genre_to_string(number) for number in range(7)] == expected
    assert [Book(1, "T", "A", 2000, number, 1).genre for number in range(7)] == [
        Genre.FICTION,
        Genre.NON_FICTION,
        Genre.SCIENCE,
        Genre.HISTORY,
        Genre.FANTASY,
        Genre.BIOGRAPHY,
        Genre.OTHER,
    ]


def test_unknown_genre_value():
    assert genre_to_string(42) == "Desconocido"


def test_unknown_genre_text_maps_to_other():
    assert genre_from_string("Poesia") is Genre.OTHER
    assert genre_from_string("Desconocido") is Genre.OTHER


def test_plain_int_genre_accepted():
    assert genre_to_string(2) == "Ciencia"


def test_book_converts_genre():
    book = Book(1, "Rayuela", "Cortazar", 1963, 0, 3)
    assert book.genre is Genre.FICTION
    assert book.quantity == 3


def test_book_keeps_out_of_range_genre():
    book = Book(1, "T", "A", 2000, 99, 1)
    assert book.genre == 99
    assert genre_to_string(book.genre) == "Desconocido"


def test_member_issued_count_tracks_list():
    member = Member(7, "Ana")
    assert member.issued_count == 0
    member.issued_books.append(3)
    member.issued_books.append(5)
    assert member.issued_count == 2


def test_members_do_not_share_lists():
    first = Member(1, "A")
    second = Member(2, "B")
    first.issued_books.append(1)
    assert second.issued_books == []