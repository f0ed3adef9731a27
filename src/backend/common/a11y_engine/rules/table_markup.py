from __future__ import annotations

from ..context import RuleContext
from ..helpers import node_identifier, normalize_text
from ..models import RuleLink
from ..outcome import YES_NO, RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule

TABLE_TYPE_OPTIONS = (("data", "Data Table"), ("layout", "Layout Table"))
TABLE_HEADINGS_OPTIONS = (
    ("none", "No headings"),
    ("columns", "Column headings"),
    ("rows", "Row headings"),
    ("columnsrows", "Both column and row headings"),
)


def header_row_count(table: Node) -> int:
    """Number of rows made only of th cells (counting stops at two)."""
    count = 0
    for row in table.find("tr"):
        cells = row.get_children()
        if cells and all(cell.get_tag_name() == "th" for cell in cells):
            count += 1
            if count > 1:
                break
    return count


@register_rule
class TableMarkup(Rule):
    slug = "table_markup"
    title = "Valid table markup"
    description = (
        "Data tables must have a valid structure with marked headings and relationships between the cells. "
        "If layout tables are present, structural table markup must not be used for these."
    )
    guideline_title = "1.3.1 Info and Relationships"
    guideline_anchor = "content-structure-separation-programmatic"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H39",
            title="Using caption elements to associate data table captions with data tables",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H43",
            title="Using id and headers attributes to associate data cells with header cells in data tables",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H51",
            title="Using table markup to present tabular information",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H63",
            title="Using the scope attribute to associate header cells and data cells in data tables",
        ),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H73",
            title="Using the summary attribute of the table element to give an overview of data tables",
        ),
    )
    may_request_data = True

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        tables = ctx.dom.find("table")
        if not tables:
            has_table_data = self.get_option(ctx, "has_table_data")
            if not has_table_data:
                outcome.ask(
                    "has_table_data",
                    "Tabular data available",
                    description="Specify whether the page contains tabular data.",
                    options=YES_NO,
                    default="no",
                )
            elif has_table_data == "yes":
                outcome.error(
                    "The page contains tabular data that do not use proper table markup.",
                    "missing_table_markup_for_tabular_data",
                )
            else:
                outcome.skip("There are no tables in the HTML code provided. Therefore this test was skipped.")
                return

        layout_tables_used = self.get_global_option(ctx, "layout_table_usage") != "no"
        for table in tables:
            identifier = node_identifier(table)
            if not layout_tables_used:
                is_data_table = True
            else:
                table_type = self.get_option(ctx, "table_type_" + identifier)
                if not table_type:
                    outcome.ask(
                        "table_type_" + identifier,
                        "Table Type",
                        description=(
                            f"Does the table in line {table.get_line_no()} contain actual data or is it a "
                            "layout table?"
                        ),
                        options=TABLE_TYPE_OPTIONS,
                        default="data",
                    )
                    continue
                is_data_table = table_type == "data"

            if is_data_table:
                self._check_data_table(ctx, outcome, table, identifier)
            else:
                self._check_layout_table(outcome, table)

        outcome.finish("All tables in the HTML code use valid table markup.")

    def _check_data_table(self, ctx: RuleContext, outcome: RuleOutcome, table: Node, identifier: str) -> None:
        line = table.get_line_no()
        if not table.find("th"):
            headings = self.get_option(ctx, "table_headings_" + identifier)
            if not headings:
                outcome.ask(
                    "table_headings_" + identifier,
                    "Table headings",
                    description=f"Specify what kind of headings the data table in line {line} uses.",
                    options=TABLE_HEADINGS_OPTIONS,
                    default="columns",
                )
            else:
                if headings in ("columns", "columnsrows"):
                    outcome.error(
                        f"The data table in line {line} is missing valid markup for its column headings.",
                        "missing_column_heading_markup",
                        table,
                    )
                if headings in ("rows", "columnsrows") and not table.find('td[scope="row"]'):
                    outcome.error(
                        f"The data table in line {line} is missing valid markup for its row headings.",
                        "missing_row_heading_markup",
                        table,
                    )
        else:
            if table.find("thead", single=True) is None and table.find("tr:first-child > th", single=True):
                outcome.error(
                    f"The data table in line {line} should use thead to wrap its column headings.",
                    "missing_thead_tag",
                    table,
                )
            if table.find("th[headers],td[headers]", single=True) is None and header_row_count(table) > 1:
                outcome.error(
                    f"The data table in line {line} should use headers and id attributes to mark complex "
                    "relationships between its cells.",
                    "missing_headers_and_id_attributes_complex",
                    table,
                )

        if table.find("tbody", single=True) is None:
            outcome.error(
                f"The data table in line {line} is missing a tbody element.",
                "missing_tbody_tag",
                table,
            )

        summary = normalize_text(table.get_attribute("summary"))
        if summary:
            for caption in table.find("caption"):
                if normalize_text(caption.text()).lower() == summary.lower():
                    outcome.error(
                        f"The summary attribute of the data table in line {line} has the same value as its "
                        "caption element.",
                        "summary_equals_caption",
                        table,
                    )
                    break

    def _check_layout_table(self, outcome: RuleOutcome, table: Node) -> None:
        if table.find("caption,th,td[headers]") or table.get_attribute("summary"):
            outcome.error(
                f"The layout table in line {table.get_line_no()} uses structural markup which is only "
                "allowed for data tables.",
                "misuse_of_structural_markup_layout",
                table,
            )
