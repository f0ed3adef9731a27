import json

import yaml

from common.a11y_engine.catalog import build_catalog, main
from common.a11y_engine.rules import CATALOG_ORDER


def test_catalog_lists_every_rule_in_run_order():
    catalog = build_catalog()
    assert len(catalog) == 27
    assert [entry.slug for entry in catalog] == list(CATALOG_ORDER)
    assert [entry.position for entry in catalog] == list(range(1, 28))


def test_catalog_entries_carry_config_schema():
    by_slug = {entry.slug: entry for entry in build_catalog()}
    images = by_slug["images_alternative_texts"]
    assert images.may_request_data is True
    assert images.config_model == "ImagesAlternativeTextsRuleConfig"
    assert "max_alt_length" in images.config_schema["properties"]
    assert images.links[0]["target"].startswith("https://www.w3.org/")
    assert by_slug["ui_components_roles"].config_model == "RuleConfigBase"


def test_main_prints_json(capsys):
    main(["--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data[0]["slug"] == "graphical_ui_alternative_texts_links"
    assert data[-1]["slug"] == "ui_components_roles"


def test_main_prints_yaml(capsys):
    main([])
    data = yaml.safe_load(capsys.readouterr().out)
    assert len(data) == 27
    assert data[25]["class_name"] == "ValidHtml"
