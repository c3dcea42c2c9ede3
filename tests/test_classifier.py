from __future__ import annotations

import json

import pytest

from features.orgchart.classifier import classify, default_rules, load_role_rules, parse_role_rules
from features.orgchart.models import Person
from features.orgchart.normalizer import normalize_row, normalize_rows


def _p(title: str = "", department: str = "") -> Person:
    return Person(id="x", name="x", title=title, department=department)


@pytest.mark.parametrize(
    "title, department, expected",
    [
        ("CEO", "", "CEO"),
        ("Chief Executive Officer", "Marketing", "CEO"),
        ("COO", "", "COO"),
        ("chief operating officer", "", "COO"),
        ("OBM", "", "COO"),
        ("Clerk", "Ops", "Admin"),
        ("Marketing Head", "Marketing", "Marketing"),
        ("Manager", "Marketing", "Marketing"),
        ("Production Manager", "Production", "Production"),
        ("Warehouse Staff", "Warehouse", "Warehouse"),
        ("Team Lead", "Sales", "Manager"),
        ("Head of Fun", "", "Manager"),
        ("Designer", "", "Default"),
        ("", "", "Default"),
    ],
)
def test_rule_order(title, department, expected) -> None:
    assert classify(_p(title, department)).name == expected


def test_department_match_is_exact() -> None:
    assert classify(_p("", "marketing")).name == "Default"
    assert classify(_p("", "Marketing ")).name == "Default"


def test_scenario_categories(scenario_rows) -> None:
    a, b, c = normalize_rows(scenario_rows)
    assert classify(a).css_class == "ceo"
    assert classify(b).css_class == "coo"
    # department rule is checked before the manager keyword
    assert classify(c).css_class == "department-head"


def test_invariant_under_column_order() -> None:
    row = {"Name": "Z", "Title": "Ads Team Lead", "Department": "Sales", "Manager": "Q"}
    reordered = dict(reversed(list(row.items())))
    assert classify(normalize_row(row)) == classify(normalize_row(reordered))


def test_every_demo_person_gets_a_category(demo_persons) -> None:
    names = {r.category.name for r in default_rules()}
    for p in demo_persons:
        assert classify(p).name in names


def test_default_table_shape() -> None:
    rules = default_rules()
    assert [r.category.name for r in rules] == [
        "CEO", "COO", "Admin", "Marketing", "Production", "Warehouse", "Manager", "Default",
    ]
    assert rules[-1].is_default


def test_custom_rules_file(tmp_path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps([
        {"category": "Founder", "css_class": "ceo", "icon": "*", "title_keywords": ["Founder"]},
        {"category": "Everyone"},
    ]), encoding="utf-8")
    rules = load_role_rules(path)
    assert classify(_p("Co-founder"), rules).name == "Founder"
    fallback = classify(_p("CEO"), rules)
    assert fallback.name == "Everyone"
    assert fallback.css_class == "everyone"


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {"category": "x"},
        [{"category": "A", "title_keywords": ["a"]}],
        [{"title_keywords": ["a"]}, {"category": "D"}],
    ],
)
def test_invalid_tables_are_rejected(raw) -> None:
    with pytest.raises(ValueError):
        parse_role_rules(raw)


def test_invalid_json_file(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{nope", encoding="utf-8")
    with pytest.raises(ValueError):
        load_role_rules(path)
