import pytest

from watchman.reorder import reorder_sdn_name, reorder_sdn_names


def test_reorder_step():
    assert reorder_sdn_name("Last, First Middle", "individual") == "First Middle Last"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Jane Doe", "Jane Doe"),
        ("Doe Other, Jane", "Jane Doe Other"),
        ("Last, First Middle", "First Middle Last"),
        ("FELIX B. MADURO S.A.", "FELIX B. MADURO S.A."),
        ("MADURO MOROS, Nicolas", "Nicolas MADURO MOROS"),
        ("IBRAHIM, Sadr", "Sadr IBRAHIM"),
        ("AL ZAWAHIRI, Dr. Ayman", "Dr. Ayman AL ZAWAHIRI"),
        ("AL-ZAYDI, Shibl Muhsin 'Ubayd", "Shibl Muhsin 'Ubayd AL-ZAYDI"),
        ("Bush, George W", "George W Bush"),
        ("RIZO MORENO, Jorge Luis", "Jorge Luis RIZO MORENO"),
    ],
)
def test_reorder_individuals(name, expected):
    assert reorder_sdn_name(name, "individual") == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("11420 CORP.", "11420 CORP."),
        ("11,420.2-1 CORP.", "11,420.2-1 CORP."),
    ],
)
def test_entities_are_not_reordered(name, expected):
    assert reorder_sdn_name(name, "") == expected


def test_type_is_case_insensitive():
    assert reorder_sdn_name("IBRAHIM, Sadr", "INDIVIDUAL") == "Sadr IBRAHIM"


def test_company_with_comma_unchanged():
    assert reorder_sdn_name("MADURO MOROS, Nicolas", "entity") == "MADURO MOROS, Nicolas"


def test_reorder_many():
    got = reorder_sdn_names(["IBRAHIM, Sadr", "Jane Doe"], "individual")
    assert got == ["Sadr IBRAHIM", "Jane Doe"]


def test_reorder_many_empty():
    assert reorder_sdn_names([], "individual") == []