import dataclasses
from pathlib import Path

from crashlog.collateral.pvss import PVSS


def test_default_display():
    assert str(PVSS()) == "all/all/all/green"


def test_display_uses_fields_in_order():
    pvss = PVSS(product="XYZ", variant="v1", stepping="a0", security="red")
    assert str(pvss) == "/".join(["XYZ", "v1", "a0", "red"])


def test_to_path():
    pvss = PVSS(product="XYZ", security="white")
    assert pvss.to_path() == Path("XYZ", "all", "all", "white")


def test_to_path_skips_dot_components():
    pvss = PVSS(product="..", variant=".", stepping="s", security="red")
    assert pvss.to_path() == Path("s", "red")


def test_replace_and_hash():
    pvss = PVSS(product="XYZ")
    other = dataclasses.replace(pvss, security="all")
    assert other.product == "XYZ"
    assert other.security == "all"
    assert {pvss: 1, other: 2}[PVSS(product="XYZ")] == 1


def test_ordering_by_fields():
    first = PVSS(product="A")
    second = PVSS(product="B")
    assert sorted([second, first]) == [first, second]