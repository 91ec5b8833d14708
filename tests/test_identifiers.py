from slidez.identifiers import _to_base36, new_id


def test_to_base36() -> None:
    assert _to_base36(0) == "0"
    assert _to_base36(35) == "z"
    assert _to_base36(36) == "10"


def test_new_id() -> None:
    ids = {new_id() for _ in range(200)}
    assert len(ids) == 200
    assert all(i and i.isalnum() and i == i.lower() for i in ids)
