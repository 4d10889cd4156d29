"""Interactive menu for managing the library."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from biblioteca.library import (
    TEXT_LIMIT,
    Library,
    LibraryError,
    NotFoundError,
    NotIssuedError,
)
from biblioteca.memory import MemoryTracker
from biblioteca.models import Book, Member, genre_to_string

BOOKS_FILE = "library.txt"
MEMBERS_FILE = "members.txt"

_MENU = (
    "\nMenu de sistema de manejo de biblioteca\n"
    "\t1. Agregar un libro\n"
    "\t\t- Ingresa los detalles del libro como ID, titulo, autor, ano de publicacion, genero y cantidad.\n"
    "\t2. Mostrar libros disponibles\n"
    "\t\t- Muestra todos los libros disponibles en la biblioteca.\n"
    "\t3. Agregar un miembro\n"
    "\t\t- Ingresa los detalles del miembro como ID y nombre.\n"
    "\t4. Prestar libro\n"
    "\t\t- Ingresa el ID del miembro y el ID del libro para prestar el libro al miembro.\n"
    "\t5. Devolver libro\n"
    "\t\t- Ingresa el ID del miembro y el ID del libro para devolver el libro a la biblioteca.\n"
    "\t6. Mostrar miembros disponibles\n"
    "\t\t- Muestra todos los miembros disponibles en la biblioteca.\n"
    "\t7. Buscar miembro\n"
    "\t\t- Busca un miembro por ID y muestra sus detalles.\n"
    "\t8. Guardar y salir\n"
    "\t\t- Guarda los datos de la biblioteca en un archivo y sale del programa.\n"
    "Indica tu opcion: "
)

_GENRE_PROMPT = (
    "Ingresa el genero del libro (0: FICTION, 1: NON_FICTION, 2: SCIENCE, "
    "3: HISTORY, 4: FANTASY, 5: BIOGRAPHY, 6: OTHER): "
)

_INVALID = "Esta no es una opcion valida!!!\n"


def format_book(book: Book) -> str:
    """Return the listing of one book."""
    return (
        f"\nID libro: {book.id}\nTitulo: {book.title}\nAutor: {book.author}\n"
        f"Ano de publicacion: {book.publication_year}\n"
        f"Genero: {genre_to_string(book.genre)}\nCantidad: {book.quantity}\n"
    )


def format_member(member: Member, library: Library) -> str:
    """Return the listing of one member with the books lent to them."""
    parts = [
        f"\nID miembro: {member.id}\nNombre: {member.name}\n"
        f"Cantidad de libros prestados: {member.issued_count}\n"
    ]
    for book_id in member.issued_books:
        book = library.find_book(book_id)
        if book is not None:
            parts.append(
                f"  Libro ID: {book.id}\n  Titulo: {book.title}\n  Autor: {book.author}\n"
            )
    return "".join(parts)


class _Input:
    """Reads answers from a line-oriented stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def _line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def integer(self) -> int:
        line = self._line()
        while not line.strip():
            line = self._line()
        return int(line.split()[0])

    def text(self) -> str:
        return self._line()[:TEXT_LIMIT]


def _add_book(library: Library, answers: _Input, output: TextIO) -> None:
    output.write("\nIngresa ID del libro: ")
    book_id = answers.integer()
    output.write("Ingresa titulo del libro: ")
    title = answers.text()
    output.write("Ingresa nombre del autor: ")
    author = answers.text()
    output.write("Ingresa el ano de publicacion: ")
    year = answers.integer()
    output.write(_GENRE_PROMPT)
    genre = answers.integer()
    output.write("Ingresa la cantidad de libros: ")
    quantity = answers.integer()
    library.add_book(Book(book_id, title, author, year, genre, quantity))
    output.write(f"Memoria asignada para un nuevo libro (ID: {book_id}) en el heap\n")
    output.write("\nEl libro fue agregado exitosamente!\n")
    library.tracker.display()


def _display_books(library: Library, output: TextIO) -> None:
    if not library.books:
        output.write("\nNo hay libros disponibles.\n")
        return
    output.write("\nLibros disponibles en biblioteca:\n")
    output.write("".join(format_book(book) for book in library.books))
    library.tracker.display()


def _add_member(library: Library, answers: _Input, output: TextIO) -> None:
    output.write("\nIngresa el ID del miembro: ")
    member_id = answers.integer()
    output.write("Ingresa el nombre del miembro: ")
    name = answers.text()
    library.add_member(Member(member_id, name))
    output.write(
        f"Memoria asignada para un nuevo miembro (ID: {member_id}) en el heap\n"
    )
    output.write("\nMiembro agregado exitosamente!\n")
    library.tracker.display()


def _ask_ids(answers: _Input, output: TextIO) -> tuple[int, int]:
    output.write("\nIngresa el ID del miembro: ")
    member_id = answers.integer()
    output.write("Ingresa el ID del libro: ")
    book_id = answers.integer()
    return member_id, book_id


def _issue_book(library: Library, answers: _Input, output: TextIO) -> None:
    member_id, book_id = _ask_ids(answers, output)
    try:
        member = library.issue_book(member_id, book_id)
    except NotFoundError as exc:
        output.write(f"\n{exc}\n")
    else:
        output.write(
            "Memoria reasignada para los libros prestados del miembro "
            f"(ID: {member.id}) en el heap\n"
        )
        output.write("\nLibro prestado satisfactoriamente!\n")
    library.tracker.display()


def _return_book(library: Library, answers: _Input, output: TextIO) -> None:
    member_id, book_id = _ask_ids(answers, output)
    try:
        member = library.return_book(member_id, book_id)
    except (NotFoundError, NotIssuedError) as exc:
        output.write(f"\n{exc}\n")
    else:
        output.write(
            "Memoria reasignada para los libros prestados del miembro "
            f"(ID: {member.id}) en el heap\n"
        )
        output.write("\nLibro devuelto satisfactoriamente!\n")
    library.tracker.display()


def _display_members(library: Library, output: TextIO) -> None:
    if not library.members:
        output.write("\nNo hay miembros disponibles.\n")
        return
    output.write("\nMiembros disponibles en biblioteca:\n")
    output.write("".join(format_member(m, library) for m in library.members))
    library.tracker.display()


def _search_member(library: Library, answers: _Input, output: TextIO) -> None:
    output.write("\nIngresa el ID del miembro: ")
    member = library.find_member(answers.integer())
    if member is None:
        output.write("\nMiembro no encontrado.\n")
    else:
        output.write(format_member(member, library))
    library.tracker.display()


def _save(library: Library, output: TextIO) -> None:
    try:
        library.save_books(BOOKS_FILE)
    except OSError:
        output.write("Error al abrir el archivo para guardar la biblioteca.\n")
    else:
        output.write(f"Biblioteca guardada exitosamente en {BOOKS_FILE}\n")
        library.tracker.display()
    try:
        library.save_members(MEMBERS_FILE)
    except OSError:
        output.write("Error al abrir el archivo para guardar los miembros.\n")
    else:
        output.write(f"Miembros guardados exitosamente en {MEMBERS_FILE}\n")


def run(library: Library, input_stream: TextIO, output: TextIO) -> None:
    """Show the menu and serve choices until "save and exit" or end of input."""
    answers = _Input(input_stream)
    actions = {
        1: lambda: _add_book(library, answers, output),
        2: lambda: _display_books(library, output),
        3: lambda: _add_member(library, answers, output),
        4: lambda: _issue_book(library, answers, output),
        5: lambda: _return_book(library, answers, output),
        6: lambda: _display_members(library, output),
        7: lambda: _search_member(library, answers, output),
    }
    while True:
        output.write(_MENU)
        try:
            choice = answers.integer()
            if choice == 8:
                _save(library, output)
                output.write("Saliendo del programa\n")
                return
            action = actions.get(choice)
            if action is None:
                output.write(_INVALID)
            else:
                action()
        except ValueError:
            output.write(_INVALID)
        except EOFError:
            return


def _load(library: Library, output: TextIO) -> None:
    try:
        library.load_books(BOOKS_FILE)
    except (OSError, LibraryError):
        output.write("Error al abrir el archivo para cargar la biblioteca.\n")
    else:
        output.write(f"Biblioteca cargada exitosamente desde {BOOKS_FILE}\n")
        library.tracker.display()
    try:
        library.load_members(MEMBERS_FILE)
    except (OSError, LibraryError):
        output.write("Error al abrir el archivo para cargar los miembros.\n")
    else:
        output.write(f"Miembros cargados exitosamente desde {MEMBERS_FILE}\n")
        library.tracker.display()


def main(argv: list[str] | None = None) -> int:
    """Load the library files, run the menu, and release everything."""
    parser = argparse.ArgumentParser(
        prog="biblioteca", description="Sistema de manejo de biblioteca."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="muestra el uso de memoria tras cada operacion",
    )
    args = parser.parse_args(argv)
    output = sys.stdout
    library = Library(MemoryTracker(verbose=args.verbose, out=output))
    _load(library, output)
    run(library, sys.stdin, output)
    library.release()
    library.tracker.display()
    return 0


if __name__ == "__main__":
    sys.exit(main())