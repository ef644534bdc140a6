from default_rows import DEFAULT_COLUMN_COUNT, DefaultRowsInitializer, default_header


def test_default_header():
    assert default_header(3) == ["Column 1", "Column 2", "Column 3"]
    assert len(default_header()) == DEFAULT_COLUMN_COUNT


def test_create_is_seeded_and_bounded():
    first = DefaultRowsInitializer(seed=7).create(4)
    second = DefaultRowsInitializer(seed=7).create(4)
    assert first == second
    assert len(first) == 4
    for row in first:
        assert len(row) == DEFAULT_COLUMN_COUNT
        for cell in row:
            assert 100.0 <= float(cell) <= 2350.0


def test_create_nothing():
    assert DefaultRowsInitializer().create(0) == []
