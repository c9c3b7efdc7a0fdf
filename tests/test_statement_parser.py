# tests/test_statement_parser.py

"""
Tests for the bank statement CSV parser.
"""

import inspect

from app.core.statement_parser import BankStatementParser, split_columns, has_date_column


# ============================================
# Test Data
# ============================================

HEADER = (
    "Extrato de Conta\n"
    "Conta: 930508110002, Moeda: AOA\n"
    "Data Movimento\tData Valor\tDescritivo\tValor\tMoeda\tSaldo\tMoeda\tOperação\tDocumento\n"
)


def tab_row(day: str, description: str, value: str) -> str:
    return f"{day}\t{day}\t{description}\t{value}\tAOA\t1000000\tAOA\t123\t456\n"


# ============================================
# Column Splitting Tests
# ============================================

class TestSplitColumns:
    """Test delimiter detection."""

    def test_tab_takes_priority(self):
        """A tab-separated line keeps commas inside columns."""
        columns = split_columns("01/03/2024\t01/03/2024\tDepósito, nº 1\t100")

        assert columns == ["01/03/2024", "01/03/2024", "Depósito, nº 1", "100"]

    def test_quoted_comma_not_split(self):
        """Commas inside double quotes stay in the field."""
        columns = split_columns('01/03/2024,01/03/2024,"Depósito, conta corrente",131000,AOA')

        assert len(columns) == 5
        assert columns[2] == '"Depósito, conta corrente"'
        assert columns[3] == "131000"

    def test_semicolon_export(self):
        """Semicolon exports with decimal commas split on semicolons."""
        columns = split_columns("01/03/2024;01/03/2024;Fecho TPA 12;96000,00;AOA")

        assert columns == ["01/03/2024", "01/03/2024", "Fecho TPA 12", "96000,00", "AOA"]

    def test_semicolons_inside_comma_description(self):
        """A comma row keeps semicolons in its description column."""
        columns = split_columns("01/03/2024,01/03/2024,Fecho TPA 12; lote 3; ref 9; POS,96000,AOA")

        assert columns == [
            "01/03/2024", "01/03/2024", "Fecho TPA 12; lote 3; ref 9; POS", "96000", "AOA",
        ]

    def test_short_semicolon_row_falls_back_to_comma(self):
        assert split_columns("Fecho TPA; lote 3,96000") == ["Fecho TPA; lote 3", "96000"]

    def test_no_delimiter_is_one_column(self):
        assert split_columns("Movimentos do periodo") == ["Movimentos do periodo"]

    def test_date_detection(self):
        assert has_date_column(["x", '"01/03/2024"']) is True
        assert has_date_column(["Data Movimento", "Descritivo"]) is False


# ============================================
# Parser Tests
# ============================================

class TestBankStatementParser:
    """Test row extraction from whole statements."""

    def test_mixed_delimiters_after_header(self):
        """Header noise is dropped; tab and quoted-comma rows both parse."""
        text = (
            HEADER
            + tab_row("01/03/2024", "Depósito nº 55", "131000")
            + '02/03/2024,02/03/2024,"Depósito, conta corrente",45000,AOA\n'
        )

        rows = list(BankStatementParser().parse(text))

        assert len(rows) == 2
        assert rows[0].line_number == 4
        assert rows[0].description == "Depósito nº 55"
        assert rows[0].value_text == "131000"
        assert rows[1].description == "Depósito, conta corrente"
        assert rows[1].value_text == "45000"

    def test_rows_after_first_date_are_all_data(self):
        """Undated continuation rows after the first dated row are kept."""
        text = (
            HEADER
            + tab_row("01/03/2024", "Depósito nº 55", "131000")
            + "\t\tcontinuação do descritivo\t\t\n"
        )

        parser = BankStatementParser()
        rows = list(parser.parse(text))

        assert len(rows) == 2
        assert rows[1].description == "continuação do descritivo"
        assert parser.rows_scanned == 2

    def test_blank_lines_and_bom(self):
        text = "\ufeff" + HEADER + "\n\n" + tab_row("01/03/2024", "Fecho TPA 1", "96000") + "\n"

        rows = list(BankStatementParser().parse(text))

        assert len(rows) == 1
        assert rows[0].description == "Fecho TPA 1"

    def test_quotes_stripped_from_value(self):
        text = HEADER + '01/03/2024,01/03/2024,"Fecho TPA 7","96000",AOA\n'

        rows = list(BankStatementParser().parse(text))

        assert rows[0].description == "Fecho TPA 7"
        assert rows[0].value_text == "96000"

    def test_short_row_scans_for_target(self):
        """Rows with fewer than 4 columns are scanned for the target and a value."""
        text = (
            HEADER
            + tab_row("01/03/2024", "Fecho TPA 1", "96000")
            + "Fecho TPA 0042,AOA,50000\n"
        )

        rows = list(BankStatementParser(target_fragments=["fecho tpa"]).parse(text))

        assert rows[1].description == "Fecho TPA 0042"
        assert rows[1].value_text == "50000"

    def test_short_row_without_value(self):
        text = HEADER + tab_row("01/03/2024", "Fecho TPA 1", "96000") + "Fecho TPA,AOA\n"

        rows = list(BankStatementParser(target_fragments=["fecho tpa"]).parse(text))

        assert rows[1].description == "Fecho TPA"
        assert rows[1].value_text == ""

    def test_bad_line_is_skipped_not_fatal(self):
        """A broken line is recorded as a warning and parsing continues."""
        text = (
            HEADER
            + tab_row("01/03/2024", "Fecho TPA 1", "96000")
            + '02/03/2024,02/03/2024,"Fecho TPA 2,50000,AOA\n'
            + tab_row("03/03/2024", "Fecho TPA 3", "70000")
        )

        parser = BankStatementParser()
        rows = list(parser.parse(text))

        assert [r.description for r in rows] == ["Fecho TPA 1", "Fecho TPA 3"]
        assert len(parser.warnings) == 1
        assert parser.warnings[0].line_number == 5
        assert "quotes" in parser.warnings[0].reason

    def test_statement_without_dates_yields_nothing(self):
        rows = list(BankStatementParser().parse(HEADER + "Sem movimentos\n"))

        assert rows == []

    def test_parse_is_lazy(self):
        assert inspect.isgenerator(BankStatementParser().parse(HEADER))
