"""Book module constants: route names and link relations."""

# Route names (resolved by the link builder)
GET_BOOKS_FOR_AUTHOR = "get_books_for_author"
GET_BOOK_FOR_AUTHOR = "get_book_for_author"
CREATE_BOOK_FOR_AUTHOR = "create_book_for_author"
UPDATE_BOOK_FOR_AUTHOR = "update_book_for_author"
PARTIALLY_UPDATE_BOOK_FOR_AUTHOR = "partially_update_book_for_author"
DELETE_BOOK_FOR_AUTHOR = "delete_book_for_author"

# Link relations
REL_DELETE_BOOK = "delete_book"
REL_UPDATE_BOOK = "update_book"
REL_PARTIALLY_UPDATE_BOOK = "partially_update_book"
REL_AUTHOR = "author"

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
