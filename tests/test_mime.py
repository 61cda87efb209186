import pytest

from tapenet.mime import DEFAULT_MIME_TYPE, MIME_TYPES, find_mime_type


@pytest.mark.parametrize(
    "resource, expected",
    [
        ("index.html", "text/html"),
        ("/static/photo.JPG", "image/jpeg"),
        ("app.js?v=1.png", "text/javascript"),
        ("archive.7z", "application/x-7z-compressed"),
        ("style.min.css", "text/css"),
    ],
)
def test_known_extensions(resource, expected):
    assert find_mime_type(resource) == expected


@pytest.mark.parametrize("resource", ["", "README", "file.unknownext", "?a.html"])
def test_default(resource):
    assert find_mime_type(resource) == DEFAULT_MIME_TYPE


def test_every_table_entry_is_found():
    for ext, mime in MIME_TYPES.items():
        assert find_mime_type(f"name.{ext.upper()}") == mime