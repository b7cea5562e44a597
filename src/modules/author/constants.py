"""Author module constants: route names, link relations and query defaults."""

# Route names (resolved by the link builder)
GET_AUTHORS = "get_authors"
GET_AUTHOR = "get_author"
CREATE_AUTHOR = "create_author"
DELETE_AUTHOR = "delete_author"
CREATE_AUTHOR_COLLECTION = "create_author_collection"
GET_AUTHOR_COLLECTION = "get_author_collection"

# Link relations
REL_AUTHORS = "authors"
REL_CREATE_AUTHOR = "create_author"
REL_DELETE_AUTHOR = "delete_author"
REL_CREATE_BOOK_FOR_AUTHOR = "create_book_for_author"
REL_BOOKS = "books"

DEFAULT_ORDER_BY = "Name"

# Wire names of the author filter parameters
GENRE_PARAM = "genre"
SEARCH_QUERY_PARAM = "searchQuery"
