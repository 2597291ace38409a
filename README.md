# bioskop

A small JSON web service for keeping a catalogue of books, each filed under a
category. It offers create, read, update, delete and paged listing for books
and categories, and keeps everything in a local SQLite database file.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
bioskop
```

Before serving, the command reads a settings file (`.env` in the working
directory unless `--env-file` names another). If the file does not exist it
stops with `Error loading .env file`. The database file is taken from the
`DATABASE_PATH` variable; a value already set in the process environment wins
over the one in the file. If `DATABASE_PATH` is missing or the database cannot
be opened, the command stops with `Gagal koneksi ke database: ...`. The
`category` and `book` tables are created if they are not there yet.

A minimal `.env`:

```
DATABASE_PATH=catalogue.db
```

Options:

| Option       | Default   | Meaning               |
|--------------|-----------|-----------------------|
| `--env-file` | `.env`    | settings file to read |
| `--host`     | `0.0.0.0` | address to listen on  |
| `--port`     | `8080`    | port to listen on     |

To embed the service in your own code, build the Flask application yourself:

```python
from bioskop.app import create_app

app = create_app("catalogue.db")
app.run(port=8080)
```

## Endpoints

| Method | Path             | Purpose                         |
|--------|------------------|---------------------------------|
| POST   | `/category`      | create a category               |
| GET    | `/category`      | list categories, paged          |
| GET    | `/category/<id>` | fetch one category              |
| PUT    | `/category/<id>` | update a category (see below)   |
| DELETE | `/category/<id>` | delete a category               |
| POST   | `/book`          | create a book                   |
| GET    | `/book`          | list books with category names  |
| GET    | `/book/<id>`     | fetch one book                  |
| PUT    | `/book/<id>`     | replace a book                  |
| DELETE | `/book/<id>`     | delete a book                   |

Every response is a JSON object with a `status` code and a `message`. The
messages are in Indonesian, for example `Data berhasil dibuat!` after a
successful create or `Book tidak ditemukan` when an id does not exist. A
successful read or write also carries a `data` field. An id in the path that
is not a whole number is answered with a 500 response.

### Categories

A category has a required `nama` and an optional `description`:

```
curl -X POST localhost:8080/category \
     -H 'Content-Type: application/json' \
     -d '{"nama": "Fiksi", "description": "Novel dan cerita pendek"}'
```

A missing `nama` is answered with 400 `Nama tidak boleh kosong`.

The update statement for categories refers to a query parameter it is not
given, so a valid `PUT /category/<id>` is always answered with 500
`Gagal memperbarui category` and the category is left unchanged. An invalid
payload is still answered with 400 first.

### Books

A book has a required `nama`, a required `kategori_id`, an optional
`description`, and an optional `rating` of at most 100:

```
curl -X POST localhost:8080/book \
     -H 'Content-Type: application/json' \
     -d '{"nama": "Laskar Pelangi", "kategori_id": 1, "rating": 90}'
```

When a payload is refused, the reply names the first rule broken in this
order: missing name (`Nama tidak boleh kosong`), missing category
(`Kategori tidak boleh kosong`), unknown category (`Kategori tidak ditemukan`,
HTTP 400 with `status` 404 in the body), rating above 100
(`Rating tidak boleh lebih dari 100`), otherwise the binding error itself.
A payload that passes validation but names a category that does not exist is
rejected by the database's foreign key and answered with 500.

Fetching a single book returns its fields without the category name; the
book list includes `kategori_nama` for each book.

### Paging

Both list endpoints accept `page` and `size` query parameters, defaulting to
page 1 and 10 items. A value that is not a positive whole number falls back to
its default. Alongside `data` (which is `null` when the page is empty), the
book list reports `page`, `size` and `total_data`; the category list reports
`page`, `size` and `totalData`.

```
curl 'localhost:8080/book?page=2&size=5'
```

## Library use

The request handling is also available without HTTP. The functions in
`bioskop.books` (`create_book`, `update_book`, `delete_book`, `list_books`,
`get_book`) and `bioskop.categories` (`create_category`, `update_category`,
`delete_category`, `list_categories`, `get_category`) take an open connection
from `bioskop.database.connect` or `bioskop.database.init_db` and return a
`(body, http_status)` pair. `bioskop.database.database_path` reads
`DATABASE_PATH` from a mapping and raises `ValueError` when it is not set.

`bioskop.models` holds the `Book` and `Category` records (each with
`to_dict()`) together with `parse_book`, `parse_category` and `parse_paging`.
The two parse functions raise `ValidationError` when a payload breaks a rule;
its `partial` attribute holds the record as far as it could be filled in.

## What it does not do

There is no authentication, no search beyond paging by id order, and no
database server support: storage is a single SQLite file.