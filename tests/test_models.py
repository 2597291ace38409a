import pytest

from bioskop.models import (
    Book,
    Category,
    ValidationError,
    parse_book,
    parse_category,
    parse_paging,
)


def test_parse_book_binds_all_fields():
    payload = {
        "nama": "Laskar Pelangi",
        "kategori_id": 3,
        "description": "novel",
        "rating": 87.5,
    }
    book = parse_book(payload)
    assert book.nama == "Laskar Pelangi"
    assert book.kategori_id == 3
    assert book.description == "novel"
    assert book.rating == 87.5
    assert book.id == 0


def test_book_to_dict_keys_and_round_trip():
    book = parse_book({"nama": "Bumi", "kategori_id": 2, "rating": 40})
    data = book.to_dict()
    assert set(data) == {
        "id",
        "nama",
        "kategori_id",
        "description",
        "rating",
        "kategori_nama",
    }
    assert parse_book(data) == book


def test_integer_rating_becomes_float():
    book = parse_book({"nama": "Bumi", "kategori_id": 2, "rating": 40})
    assert book.rating == 40
    assert isinstance(book.rating, float)


def test_missing_nama_keeps_partial_book():
    with pytest.raises(ValidationError) as info:
        parse_book({"kategori_id": 3, "rating": 10})
    assert info.value.partial.nama == ""
    assert info.value.partial.kategori_id == 3
    assert "Nama" in info.value.message


def test_zero_kategori_is_rejected():
    with pytest.raises(ValidationError) as info:
        parse_book({"nama": "Bumi", "kategori_id": 0})
    assert "KategoriID" in info.value.message
    assert "required" in info.value.message
    assert info.value.partial.nama == "Bumi"


def test_rating_above_limit_is_rejected():
    with pytest.raises(ValidationError) as info:
        parse_book({"nama": "Bumi", "kategori_id": 1, "rating": 100.5})
    assert "lte" in info.value.message
    assert info.value.partial.rating == 100.5


def test_rating_at_limit_is_accepted():
    assert parse_book({"nama": "Bumi", "kategori_id": 1, "rating": 100}).rating == 100


def test_wrong_type_leaves_field_empty():
    with pytest.raises(ValidationError) as info:
        parse_book({"nama": 5, "kategori_id": 1})
    assert info.value.partial.nama == ""
    assert info.value.partial.kategori_id == 1
    assert "nama" in info.value.message


def test_bool_is_not_an_integer():
    with pytest.raises(ValidationError) as info:
        parse_book({"nama": "Bumi", "kategori_id": True})
    assert info.value.partial.kategori_id == 0


def test_null_values_keep_defaults():
    book = parse_book({"nama": "Bumi", "kategori_id": 1, "description": None})
    assert book.description == ""


@pytest.mark.parametrize("payload", [None, [1, 2], "text"])
def test_non_object_payload_is_rejected(payload):
    with pytest.raises(ValidationError) as info:
        parse_book(payload)
    assert info.value.partial == Book()


def test_parse_category_round_trip():
    category = parse_category({"nama": "Fiksi", "description": "cerita"})
    assert category == Category(nama="Fiksi", description="cerita")
    assert parse_category(category.to_dict()) == category
    assert set(category.to_dict()) == {"id", "nama", "description"}


def test_parse_category_requires_nama():
    with pytest.raises(ValidationError) as info:
        parse_category({"description": "cerita"})
    assert info.value.partial.description == "cerita"
    assert "Nama" in info.value.message


def test_parse_category_type_error():
    with pytest.raises(ValidationError) as info:
        parse_category({"nama": "Fiksi", "description": 12})
    assert info.value.partial.nama == "Fiksi"
    assert info.value.partial.description == ""


@pytest.mark.parametrize(
    "page, size, expected",
    [
        (None, None, (1, 10)),
        ("2", "5", (2, 5)),
        ("0", "-1", (1, 10)),
        ("abc", "1.5", (1, 10)),
        ("", "", (1, 10)),
        (" 3", "7 ", (1, 10)),
        ("+4", "03", (4, 3)),
    ],
)
def test_parse_paging(page, size, expected):
    assert parse_paging(page, size) == expected