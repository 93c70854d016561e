"""A small lending library keyed by book id."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Book:
    """A book and who, if anyone, has borrowed it."""

    id: int
    title: str
    author: str
    borrower: str | None = None

    @property
    def is_borrowed(self) -> bool:
        return self.borrower is not None


class LibraryError(Exception):
    """Base class for library errors."""


class BookExistsError(LibraryError):
    """A book with the id is already in the library."""


class BookNotFoundError(LibraryError, KeyError):
    """No book has the id."""

    def __str__(self) -> str:
        return str(self.args[0])


class BookBorrowedError(LibraryError):
    """The book is already lent out."""


class BookNotBorrowedError(LibraryError):
    """The book is not lent out."""


class Library:
    """Books in the order they were added."""

    def __init__(self) -> None:
        self._books: dict[int, Book] = {}

    def _get(self, book_id: int) -> Book:
        try:
            return self._books[book_id]
        except KeyError:
            raise BookNotFoundError(f"Book id : {book_id} doesn't exists") from None

    def add_book(self, book_id: int, title: str, author: str) -> Book:
        """Add a new book; ids must be unique."""
        if book_id in self._books:
            raise BookExistsError(f"Book id : {book_id} already exists.")
        book = Book(book_id, title, author)
        self._books[book_id] = book
        return book

    def borrow_book(self, book_id: int, user: str) -> Book:
        """Lend a book to a user."""
        book = self._get(book_id)
        if book.is_borrowed:
            raise BookBorrowedError(
                f"Invalid : Book id : {book_id} - {book.title} is already borrowed "
                f"by {book.borrower}"
            )
        book.borrower = user
        return book

    def return_book(self, book_id: int) -> Book:
        """Take a lent book back."""
        book = self._get(book_id)
        if not book.is_borrowed:
            raise BookNotBorrowedError(f"Book id : {book_id} is not borrowed.")
        book.borrower = None
        return book

    def find_by_title(self, title: str) -> Book | None:
        """The first book with exactly this title, if any."""
        return next((b for b in self._books.values() if b.title == title), None)

    def find_by_author(self, author: str) -> list[Book]:
        """All books by exactly this author."""
        return [b for b in self._books.values() if b.author == author]

    def books(self) -> list[Book]:
        """All books in the order they were added."""
        return list(self._books.values())

    def listing(self) -> str:
        """The catalogue as printable text."""
        lines = ["Book List in Library"]
        for number, book in enumerate(self._books.values(), start=1):
            lines.append(f"Book {number}")
            lines.append(f"{book.id} {book.title} by {book.author}")
        lines.append(f"Total book in Library : {len(self._books)}")
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the library demonstration."""
    library = Library()
    library.add_book(101, "The C++ Programming Language", "Bjarne Stroustrup")
    library.add_book(102, "Clean Code", "Robert C. Martin")
    library.add_book(103, "Design Patterns", "Erich Gamma")

    for book_id, user in ((101, "Alice"), (102, "Bob"), (101, "Charlie")):
        try:
            book = library.borrow_book(book_id, user)
        except LibraryError as exc:
            print(exc)
        else:
            print(f"Book id: {book_id} {book.title} is borrowed by {user} successfully")

    for _ in range(2):
        try:
            library.return_book(101)
        except LibraryError as exc:
            print(exc)
        else:
            print("Book id 101 is returned.")

    title = "Clean Code"
    if library.find_by_title(title):
        print(f"Book : {title} is availale")
    else:
        print(f"Book : {title} is NOT availale in Library")

    author = "Erich Gamma"
    found = library.find_by_author(author)
    if found:
        print(f"Book : {found[0].title} is availale written by {author}")
    else:
        print(f"No books availabe with Writter : {author}")

    print(library.listing())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())