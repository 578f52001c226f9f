"""End-to-end tests for the fintrack CLI against a temporary data file."""

import json
from pathlib import Path

import pandas as pd
import pytest
from typer.testing import CliRunner

from fintrack.cli import app
from fintrack.config import get_config_path, get_default_data_path, load_config, save_config

runner = CliRunner()


@pytest.fixture
def data_file(data_path: Path) -> Path:
    """Configure the CLI to use the test's data file."""
    save_config({"storage": {"data_file": str(data_path)}})
    return data_path


def read_records(path: Path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


class TestAddListSummary:
    """Tests for add, list and summary."""

    def test_add_assigns_ids_and_persists(self, data_file: Path) -> None:
        """Should add records with sequential ids and write them."""
        first = runner.invoke(app, ["add", "Income", "100", "Salary"])
        second = runner.invoke(app, ["add", "Expense", "40.5", "Groceries"])

        assert first.exit_code == 0, first.output
        assert "Transaction 1 added" in first.output
        assert "No data found, starting fresh" in first.output
        assert second.exit_code == 0, second.output
        assert "Transaction 2 added" in second.output
        assert read_records(data_file) == [
            {"id": 1, "type": "Income", "amount": 100.0, "description": "Salary"},
            {"id": 2, "type": "Expense", "amount": 40.5, "description": "Groceries"},
        ]

    def test_add_negative_amount_after_separator(self, data_file: Path) -> None:
        """Should accept negative amounts after --."""
        result = runner.invoke(app, ["add", "--", "Expense", "-5", "Refund"])

        assert result.exit_code == 0, result.output
        assert read_records(data_file)[0]["amount"] == -5.0

    def test_invalid_amount_fails_before_store(self, data_file: Path) -> None:
        """Should reject a non-numeric amount without writing anything."""
        result = runner.invoke(app, ["add", "Income", "lots", "Salary"])

        assert result.exit_code == 1
        assert "Invalid amount" in result.output
        assert not data_file.exists()

    def test_list_shows_transactions(self, data_file: Path) -> None:
        """Should render every transaction."""
        runner.invoke(app, ["add", "Income", "100", "Salary"])
        runner.invoke(app, ["add", "Expense", "40", "Rent"])

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert "Salary" in result.output
        assert "Rent" in result.output
        assert "100.00" in result.output

    def test_list_empty(self, data_file: Path) -> None:
        """Should say when there are no transactions."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "No transactions found" in result.output

    def test_summary_totals(self, data_file: Path) -> None:
        """Should show income, expense and net flow to two decimals."""
        runner.invoke(app, ["add", "Income", "100", "Salary"])
        runner.invoke(app, ["add", "Expense", "40", "Rent"])
        runner.invoke(app, ["add", "income", "10", "Gift"])

        result = runner.invoke(app, ["summary"])

        assert result.exit_code == 0, result.output
        assert "110.00" in result.output
        assert "40.00" in result.output
        assert "70.00" in result.output

    def test_corrupt_data_file_is_reported(self, data_file: Path) -> None:
        """Should warn about an unreadable data file and continue."""
        data_file.parent.mkdir(parents=True)
        data_file.write_text("garbage", encoding="utf-8")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Could not load" in result.output
        assert "No transactions found" in result.output


class TestEditDelete:
    """Tests for edit and delete."""

    def test_edit_updates_record(self, data_file: Path) -> None:
        """Should replace the fields of the transaction."""
        runner.invoke(app, ["add", "Expense", "5", "Coffee"])

        result = runner.invoke(app, ["edit", "1", "Income", "7.25", "Refund"])

        assert result.exit_code == 0, result.output
        assert "Transaction 1 updated" in result.output
        assert read_records(data_file) == [{"id": 1, "type": "Income", "amount": 7.25, "description": "Refund"}]

    def test_edit_unknown_id_changes_nothing(self, data_file: Path) -> None:
        """Should report that nothing matched and exit cleanly."""
        runner.invoke(app, ["add", "Expense", "5", "Coffee"])

        result = runner.invoke(app, ["edit", "9", "Income", "1", "x"])

        assert result.exit_code == 0
        assert "No transaction with ID 9" in result.output
        assert read_records(data_file)[0]["description"] == "Coffee"

    def test_edit_malformed_id(self, data_file: Path) -> None:
        """Should reject a non-integer id."""
        result = runner.invoke(app, ["edit", "one", "Income", "1", "x"])

        assert result.exit_code == 1
        assert "Invalid transaction ID" in result.output

    def test_delete_removes_record(self, data_file: Path) -> None:
        """Should remove the transaction from the file."""
        runner.invoke(app, ["add", "Income", "1", "a"])
        runner.invoke(app, ["add", "Income", "2", "b"])

        result = runner.invoke(app, ["delete", "1"])

        assert result.exit_code == 0, result.output
        assert [record["id"] for record in read_records(data_file)] == [2]

    def test_delete_unknown_id(self, data_file: Path) -> None:
        """Should report that nothing matched."""
        result = runner.invoke(app, ["delete", "3"])

        assert result.exit_code == 0
        assert "No transaction with ID 3" in result.output


class TestCsv:
    """Tests for export and import."""

    def test_export_writes_csv(self, data_file: Path, tmp_path: Path) -> None:
        """Should write all transactions with id, type, amount, description."""
        runner.invoke(app, ["add", "Income", "100", "Salary"])
        runner.invoke(app, ["add", "Expense", "12.5", "Lunch"])
        output = tmp_path / "export.csv"

        result = runner.invoke(app, ["export", str(output)])

        assert result.exit_code == 0, result.output
        frame = pd.read_csv(output)
        assert list(frame.columns) == ["id", "type", "amount", "description"]
        assert frame["amount"].tolist() == [100.0, 12.5]

    def test_import_adds_rows_in_order(self, data_file: Path, tmp_path: Path) -> None:
        """Should add each row with the next id."""
        runner.invoke(app, ["add", "Income", "1", "Existing"])
        source = tmp_path / "import.csv"
        source.write_text("Type,Amount,Description\nIncome,200,Bonus\nExpense,-3.5,Fee\n", encoding="utf-8")

        result = runner.invoke(app, ["import", str(source)])

        assert result.exit_code == 0, result.output
        assert "Imported 2 transactions" in result.output
        assert read_records(data_file)[1:] == [
            {"id": 2, "type": "Income", "amount": 200.0, "description": "Bonus"},
            {"id": 3, "type": "Expense", "amount": -3.5, "description": "Fee"},
        ]

    def test_import_bad_row_imports_nothing(self, data_file: Path, tmp_path: Path) -> None:
        """Should abort the whole import on one invalid amount."""
        source = tmp_path / "import.csv"
        source.write_text("type,amount,description\nIncome,200,Bonus\nExpense,abc,Fee\n", encoding="utf-8")

        result = runner.invoke(app, ["import", str(source)])

        assert result.exit_code == 1
        assert "Row 3" in result.output
        assert not data_file.exists()


class TestAdmin:
    """Tests for init and backup."""

    def test_init_creates_config_and_data_file(self) -> None:
        """Should create the config and an empty data file."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0, result.output
        assert get_config_path().exists()
        assert read_records(get_default_data_path()) == []

    def test_init_refuses_to_overwrite(self) -> None:
        """Should fail without --force when files exist."""
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "Initialization failed" in result.output

    def test_backup_copies_data_file(self, data_file: Path, tmp_path: Path) -> None:
        """Should copy the data file and config into the backup directory."""
        runner.invoke(app, ["add", "Income", "100", "Salary"])
        backup_dir = tmp_path / "backups"

        result = runner.invoke(app, ["backup", "--output", str(backup_dir)])

        assert result.exit_code == 0, result.output
        backups = sorted(p.name for p in backup_dir.iterdir())
        assert any(name.startswith("transactions_") for name in backups)
        assert any(name.startswith("config_") for name in backups)

    def test_backup_without_data_file(self) -> None:
        """Should fail when there is nothing to back up."""
        result = runner.invoke(app, ["backup"])

        assert result.exit_code == 1


class TestInvalidConfig:
    """Tests for commands run with a config file that is not valid TOML."""

    @pytest.fixture
    def corrupt_config(self) -> Path:
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True)
        config_path.write_text("storage = [", encoding="utf-8")
        return config_path

    def test_init_force_repairs_config(self, corrupt_config: Path) -> None:
        """Should warn, fall back to defaults and rewrite the config."""
        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0, result.output
        assert "Invalid config file" in result.output
        assert load_config(corrupt_config)["logging"]["level"] == "WARNING"
        assert read_records(get_default_data_path()) == []

    def test_commands_use_default_data_file(self, corrupt_config: Path) -> None:
        """Should keep working against the default data file."""
        result = runner.invoke(app, ["add", "Income", "10", "Gift"])

        assert result.exit_code == 0, result.output
        assert "Transaction 1 added" in result.output
        assert read_records(get_default_data_path())[0]["description"] == "Gift"
