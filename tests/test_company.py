import pytest

from watchman.company import remove_company_titles


def test_company_name_cleanup_step():
    assert remove_company_titles("SAI ADVISORS INC.") == "SAI ADVISORS"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("SIS D.O.O.", "SIS"),
        ("SAI ADVISORS INC.", "SAI ADVISORS"),
        ("COBALT REFINERY CO. INC.", "COBALT REFINERY"),
        ("AL BARAKA EXCHANGE LLC", "AL BARAKA EXCHANGE"),
        ("RUNNING BROOK, LLC (USA)", "RUNNING BROOK, (USA)"),
        ("YAKIMA OIL TRADING, LLP", "YAKIMA OIL TRADING,"),
        ("MKS INTERNATIONAL CO. LTD.", "MKS INTERNATIONAL"),
        (
            "SHANGHAI NORTH TRANSWAY INTERNATIONAL TRADING CO.",
            "SHANGHAI NORTH TRANSWAY INTERNATIONAL TRADING",
        ),
        ("DANDONG ZHICHENG METALLIC MATERIAL CO., LTD.", "DANDONG ZHICHENG METALLIC MATERIAL."),
        ("ADVANCED ELECTRONICS DEVELOPMENT, LTD", "ADVANCED ELECTRONICS DEVELOPMENT"),
        ("AMD CO. LTD AGENCY", "AMD AGENCY"),
        ("REYNOLDS AND WILSON, LTD.", "REYNOLDS AND WILSON."),
        ("AEROCOMERCIAL ALAS DE COLOMBIA LTDA.", "AEROCOMERCIAL ALAS DE COLOMBIA"),
        ("DIMABE LTDA.", "DIMABE"),
        ("ASCOTEC STEEL TRADING GMBH", "ASCOTEC STEEL TRADING"),
        ("TROPIC TOURS GMBH", "TROPIC TOURS"),
        ("MC OVERSEAS TRADING COMPANY SA DE CV", "MC OVERSEAS TRADING COMPANY"),
        ("SIRJANCO TRADING L.L.C.", "SIRJANCO TRADING"),
        ("11420 CORP.", "11420 CORP."),
        ("11,420.2-1 CORP.", "11,420.2-1 CORP."),
        ("TADBIR ECONOMIC DEVELOPMENT GROUP", "TADBIR ECONOMIC DEVELOPMENT GROUP"),
        ("DI LAURO, Marco", "DI LAURO, Marco"),
        ("PETRO ROYAL FZE", "PETRO ROYAL FZE"),
    ],
)
def test_remove_company_titles(name, expected):
    assert remove_company_titles(name) == expected