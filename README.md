# biblioteca

A console library management system. It keeps a catalogue of books and a list
of members, lends books to members and takes them back, and stores everything
in two plain-text files between sessions. Its prompts and messages are in
Spanish.

## Installation

```
pip install .
```

## Running the program

```
biblioteca
biblioteca --verbose
```

When it starts, the program loads `library.txt` and `members.txt` from the
current directory and reports whether each could be read. Then it shows a
menu:

1. Add a book: ID, title, author, publication year, genre and quantity
2. Show the books in the catalogue
3. Add a member: ID and name
4. Lend a book: member ID and book ID
5. Return a book: member ID and book ID
6. Show all members and the books they hold
7. Find a member by ID
8. Save both files and exit

Any other number prints "Esta no es una opcion valida!!!". If input ends before
option 8 is chosen, the program exits without saving.

Genres are entered as numbers: 0 Ficcion, 1 No Ficcion, 2 Ciencia, 3 Historia,
4 Fantasia, 5 Biografia, 6 Otro. Titles, authors and names longer than 99
characters are cut to 99.

With `--verbose`, the program prints a memory usage table after each
operation and a line for every record it allocates or releases (see
`MemoryTracker` below).

## Using it as a library

```python
from biblioteca.library import Library, NotFoundError
from biblioteca.memory import MemoryTracker
from biblioteca.models import Book, Genre, Member

library = Library(MemoryTracker(verbose=False))
library.add_book(Book(id=1, title="Rayuela", author="Julio Cortazar",
                      publication_year=1963, genre=Genre.FICTION, quantity=2))
library.add_member(Member(id=10, name="Ana"))

member = library.issue_book(10, 1)   # member.issued_books == [1]
library.return_book(10, 1)

library.save_books("library.txt")
library.save_members("members.txt")
```

- `biblioteca.models` holds `Genre` (an `IntEnum`), the dataclasses `Book`
  and `Member` (with the read-only `issued_count`), and `genre_to_string` /
  `genre_from_string`. An unknown genre number gives "Desconocido"; unknown
  genre text gives `Genre.OTHER`.
- `biblioteca.library.Library` keeps `books` and `members` newest first.
  `find_book` and `find_member` return the first match or `None`.
  `issue_book` raises `NotFoundError` if the member is unknown or no book with
  that ID has a copy left. `return_book` raises `NotFoundError` if the book or
  member is unknown, and `NotIssuedError` if the member does not hold the book.
  Both are subclasses of `LibraryError`, and both methods return the member.
  `load_books` and `load_members` add each record to the front and return how
  many were read; a malformed file raises `LibraryError`. `release` drops
  every book and member.
- `write_books`, `read_books`, `write_members` and `read_members` do the same
  file work on any open text stream.
- `biblioteca.cli` has `format_book`, `format_member`, `run(library,
  input_stream, output)` for driving the menu from any streams, and `main`.

## Memory tracker

`biblioteca.memory.MemoryTracker(verbose=False, out=None)` counts heap
allocations and releases of records and keeps a list of live blocks,
identified by the Python object id and a nominal size in bytes. It always
counts; only with `verbose=True` does it write messages and, through
`display()`, the report to `out` (standard output by default). `render()`
returns the report as text either way. Stack counters exist and can be raised
with `record_stack_allocation` and `record_stack_deallocation`, but the library
itself never changes them.

## File format

Each book takes six lines: ID, title, author, year, genre name and quantity.
Each member takes three lines (ID, name and the number of books on loan),
followed by one line for each borrowed book ID. Blank lines between numeric
fields are skipped.

Because loading puts each record at the front, a load followed by a save
writes the records in the reverse of their order in the file.