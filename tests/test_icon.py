import json

from favifind.icon import Icon


def test_defaults_are_empty():
    icon = Icon(url="https://www.example.com/favicon.ico")
    assert icon.mime_type == ""
    assert icon.file_ext == ""


def test_copy_is_equal_but_independent():
    icon = Icon(url="https://www.example.com/a.png", mime_type="image/png", file_ext="png")
    duplicate = icon.copy()
    assert duplicate == icon
    assert duplicate is not icon
    duplicate.url = "https://www.example.com/b.png"
    assert icon.url == "https://www.example.com/a.png"


def test_to_dict_uses_serialised_names():
    icon = Icon(url="https://www.example.com/a.png", mime_type="image/png", file_ext="png")
    assert icon.to_dict() == {
        "url": "https://www.example.com/a.png",
        "mimetype": "image/png",
        "extension": "png",
    }


def test_to_dict_round_trips_through_json():
    icon = Icon(url="https://www.example.com/a.ico", mime_type="image/x-icon", file_ext="ico")
    data = json.loads(json.dumps(icon.to_dict()))
    rebuilt = Icon(url=data["url"], mime_type=data["mimetype"], file_ext=data["extension"])
    assert rebuilt == icon


def test_str_quotes_values():
    icon = Icon(url="https://www.example.com/favicon.ico", mime_type="image/x-icon")
    assert str(icon) == 'Icon{URL: "https://www.example.com/favicon.ico",MimeType: "image/x-icon"}'


def test_str_escapes_quotes():
    icon = Icon(url='a"b', mime_type="")
    text = str(icon)
    assert '\\"' in text
    assert text.endswith('MimeType: ""}')