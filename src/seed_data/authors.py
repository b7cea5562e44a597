"""Demo authors with their books, in AuthorForCreation payload form."""

AUTHORS: list[dict] = [
    {
        "first_name": "Stephen",
        "last_name": "King",
        "date_of_birth": "1947-09-21",
        "genre": "Horror",
        "books": [
            {"title": "The Shining", "description": "A caretaker's family winters alone in a haunted hotel."},
            {"title": "Misery", "description": "A novelist is held captive by his most devoted reader."},
            {"title": "It", "description": "Seven friends face a shape-shifting evil in Derry, Maine."},
        ],
    },
    {
        "first_name": "George",
        "last_name": "RR Martin",
        "date_of_birth": "1948-09-20",
        "genre": "Fantasy",
        "books": [
            {"title": "A Game of Thrones", "description": "Noble houses scheme for the Iron Throne."},
            {"title": "A Dance with Dragons", "description": "The fifth volume of A Song of Ice and Fire."},
        ],
    },
    {
        "first_name": "Neil",
        "last_name": "Gaiman",
        "date_of_birth": "1960-11-10",
        "genre": "Fantasy",
        "books": [
            {"title": "American Gods", "description": "Old gods and new wage war across America."},
        ],
    },
    {
        "first_name": "Tom",
        "last_name": "Lanoye",
        "date_of_birth": "1958-08-27",
        "genre": "Various",
        "books": [
            {"title": "Speechless", "description": "A son's account of his mother's last years."},
        ],
    },
    {
        "first_name": "Douglas",
        "last_name": "Adams",
        "date_of_birth": "1952-03-11",
        "genre": "Science fiction",
        "books": [
            {
                "title": "The Hitchhiker's Guide to the Galaxy",
                "description": "Earth is demolished for a hyperspace bypass.",
            },
        ],
    },
    {
        "first_name": "James",
        "last_name": "Ellroy",
        "date_of_birth": "1948-03-04",
        "genre": "Thriller",
        "books": [
            {"title": "American Tabloid", "description": "Three men in the shadows of the Kennedy years."},
        ],
    },
]
