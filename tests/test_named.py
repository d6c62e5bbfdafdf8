from megaengine.named import Named


def test_default_name_is_empty():
    assert Named().name == ""


def test_name_can_be_set():
    item = Named()
    item.name = "TitleScene"
    assert item.name == "TitleScene"


def test_name_from_constructor():
    assert Named("MainScene").name == "MainScene"