import pytest

from bookingkit.library import (
    Book,
    BookBorrowedError,
    BookExistsError,
    BookNotBorrowedError,
    BookNotFoundError,
    Library,
    LibraryError,
    main,
)


@pytest.fixture
def library():
    lib = Library()
    lib.add_book(101, "The C++ Programming Language", "Bjarne Stroustrup")
    lib.add_book(102, "Clean Code", "Robert C. Martin")
    lib.add_book(103, "Design Patterns", "Erich Gamma")
    return lib


def test_add_keeps_order(library):
    assert [b.id for b in library.books()] == [101, 102, 103]


def test_new_book_not_borrowed(library):
    book = library.books()[0]
    assert book.is_borrowed is False
    assert book.borrower is None


def test_duplicate_id_rejected(library):
    with pytest.raises(BookExistsError, match="Book id : 101 already exists."):
        library.add_book(101, "Other", "Someone")
    assert len(library.books()) == 3


def test_borrow(library):
    book = library.borrow_book(101, "Alice")
    assert book.borrower == "Alice"
    assert book.is_borrowed is True


def test_borrow_twice_rejected(library):
    library.borrow_book(101, "Alice")
    with pytest.raises(BookBorrowedError, match="Alice"):
        library.borrow_book(101, "Charlie")
    assert library.books()[0].borrower == "Alice"


def test_borrow_unknown_rejected(library):
    with pytest.raises(BookNotFoundError):
        library.borrow_book(999, "Alice")


def test_return(library):
    library.borrow_book(101, "Alice")
    book = library.return_book(101)
    assert book.is_borrowed is False


def test_return_twice_rejected(library):
    library.borrow_book(101, "Alice")
    library.return_book(101)
    with pytest.raises(BookNotBorrowedError, match="Book id : 101 is not borrowed."):
        library.return_book(101)


def test_return_unknown_rejected(library):
    with pytest.raises(LibraryError):
        library.return_book(5)


def test_find_by_title(library):
    assert library.find_by_title("Clean Code").id == 102
    assert library.find_by_title("Missing") is None


def test_find_by_author(library):
    library.add_book(104, "Another", "Erich Gamma")
    assert [b.id for b in library.find_by_author("Erich Gamma")] == [103, 104]
    assert library.find_by_author("Nobody") == []


def test_listing(library):
    lines = library.listing().splitlines()
    assert lines[0] == "Book List in Library"
    assert lines[1] == "Book 1"
    assert lines[2] == "101 The C++ Programming Language by Bjarne Stroustrup"
    assert lines[-1] == "Total book in Library : 3"


def test_empty_listing():
    assert Library().listing().splitlines()[-1] == "Total book in Library : 0"


def test_added_book_equals_fresh_book(library):
    assert library.books()[1] == Book(102, "Clean Code", "Robert C. Martin")


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "is borrowed by Alice successfully" in out
    assert "Book id 101 is returned." in out
    assert "Book id : 101 is not borrowed." in out
    assert "Book : Clean Code is availale" in out