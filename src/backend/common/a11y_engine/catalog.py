from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from .rules import CATALOG_ORDER


class RuleCatalogEntry(BaseModel):
    position: int
    slug: str
    title: str
    description: str = ""
    guideline_title: str = ""
    guideline_anchor: str = ""
    links: List[Dict[str, str]] = Field(default_factory=list)
    may_request_data: bool = False

    module: str
    class_name: str

    config_model: str
    config_schema: Dict[str, Any]


def build_catalog() -> List[RuleCatalogEntry]:
    entries: List[RuleCatalogEntry] = []
    for position, rule in enumerate(registry.create_all(CATALOG_ORDER), start=1):
        rule_cls = type(rule)
        cfg_model = rule_cls.config_model
        entries.append(
            RuleCatalogEntry(
                position=position,
                slug=rule.slug,
                title=rule.title,
                description=rule.description,
                guideline_title=rule.guideline_title,
                guideline_anchor=rule.guideline_anchor,
                links=[link.model_dump() for link in rule.links],
                may_request_data=rule.may_request_data,
                module=rule_cls.__module__,
                class_name=rule_cls.__name__,
                config_model=cfg_model.__name__,
                config_schema=cfg_model.model_json_schema(),
            )
        )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise SystemExit("PyYAML is required for YAML output. Install it with `pip install pyyaml`.") from exc

    return yaml.safe_dump(catalog, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the accessibility rule catalog in run order.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump() for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
