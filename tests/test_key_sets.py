from core.operations.key_sets import difference_keys, intersect_keys, union_keys

SCOTT = {"firstname": 1, "lastname": 1, "email": 1, "username": 1}
ANDREW = {"firstname": 1, "lastname": 1, "email": 1}


def test_union():
    assert union_keys(SCOTT, ANDREW) == ["email", "firstname", "lastname", "username"]


def test_intersect():
    assert intersect_keys(SCOTT, ANDREW) == ["email", "firstname", "lastname"]


def test_difference_is_symmetric():
    assert difference_keys(SCOTT, ANDREW) == ["username"]
    assert difference_keys(ANDREW, SCOTT) == ["username"]
    assert difference_keys({"a": 1}, {"b": 1}) == ["a", "b"]


def test_empty_records():
    assert union_keys({}, {}) == []
    assert intersect_keys({"a": 1}, {}) == []
