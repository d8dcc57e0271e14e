"""
Unit tests for employee_demo/cli/

Coverage plan
─────────────
arg parsing   → list / add / statuses subcommands, --data-dir
cmd_list      → empty store, all, filtered
cmd_add       → valid add saves, invalid add leaves store unchanged
main()        → exit codes and output end-to-end over a temp data dir
"""

import json

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from employee_demo.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data dir seeded with a legacy CSV file."""
    (tmp_path / "employees.csv").write_text(
        "1,Anna,true\n2,Brian,false\n3,Dana,true\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def store(data_dir):
    """Loaded EmployeeStore over the seeded data dir."""
    from employee_demo.config import StoreConfig
    from employee_demo.store.employee_store import EmployeeStore
    s = EmployeeStore(StoreConfig(data_dir=data_dir))
    s.load()
    return s


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_list_defaults(self):
        ns = _parse(["list"])
        assert ns.subcommand == "list"
        assert ns.id is None
        assert ns.name == ""
        assert ns.status == "Both"

    def test_list_filters(self):
        ns = _parse(["list", "--id", "5", "--name", "An", "--status", "Active"])
        assert (ns.id, ns.name, ns.status) == (5, "An", "Active")

    def test_add_parses_fields(self):
        ns = _parse(["add", "--id", "7", "--name", "Dana Scott", "--status", "Inactive"])
        assert (ns.id, ns.name, ns.status) == (7, "Dana Scott", "Inactive")

    def test_add_rejects_both_status(self):
        with pytest.raises(SystemExit):
            _parse(["add", "--id", "7", "--name", "D", "--status", "Both"])

    def test_data_dir_flag(self):
        ns = _parse(["--data-dir", "/tmp/x", "statuses"])
        assert ns.data_dir == "/tmp/x"
        assert ns.subcommand == "statuses"


# ─────────────────────────────────────────────────────────────────────────────
# 2. Commands
# ─────────────────────────────────────────────────────────────────────────────

class TestListCommand:

    def test_list_empty_store_outputs_zero(self, tmp_path, capsys):
        from employee_demo.cli.main import cmd_list
        from employee_demo.config import StoreConfig
        from employee_demo.store.employee_store import EmployeeStore
        cmd_list(store=EmployeeStore(StoreConfig(data_dir=tmp_path)))
        assert "0 employees found." in capsys.readouterr().out

    def test_list_all(self, store, capsys):
        from employee_demo.cli.main import cmd_list
        shown = cmd_list(store=store)
        out = capsys.readouterr().out
        assert len(shown) == 3
        assert "Anna" in out and "Brian" in out and "Dana" in out

    def test_list_filtered(self, store, capsys):
        from employee_demo.cli.main import cmd_list
        from employee_demo.store.models import Criteria, Status
        shown = cmd_list(store=store, criteria=Criteria(status=Status.INACTIVE))
        assert [e.name for e in shown] == ["Brian"]
        assert "Inactive" in capsys.readouterr().out


class TestAddCommand:

    def test_add_appends_and_saves(self, store, data_dir):
        from employee_demo.cli.main import cmd_add
        cmd_add(store=store, employee_id=9, name="Zoe", status="Active")
        assert len(store) == 4
        data = json.loads((data_dir / "employees.json").read_text(encoding="utf-8"))
        assert data[-1] == {"Id": 9, "Name": "Zoe", "IsActive": True}

    def test_zero_id_is_rejected_before_reaching_store(self, store, data_dir):
        from employee_demo.cli.main import cmd_add
        from employee_demo.exceptions import ValidationError
        with pytest.raises(ValidationError):
            cmd_add(store=store, employee_id=0, name="Zoe", status="Active")
        assert len(store) == 3
        assert not (data_dir / "employees.json").exists()

    def test_statuses(self, capsys):
        from employee_demo.cli.main import cmd_statuses
        cmd_statuses()
        assert capsys.readouterr().out.split() == ["Both", "Active", "Inactive"]


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_no_subcommand_prints_help(self, capsys):
        from employee_demo.cli.main import main
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_list_exit_code_zero(self, data_dir, capsys):
        from employee_demo.cli.main import main
        assert main(["--data-dir", str(data_dir), "list", "--name", "An"]) == 0
        out = capsys.readouterr().out
        assert "Anna" in out
        assert "Brian" not in out

    def test_missing_data_returns_one(self, tmp_path, capsys):
        from employee_demo.cli.main import main
        assert main(["--data-dir", str(tmp_path), "list"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_add_then_list_reads_json(self, data_dir, capsys):
        from employee_demo.cli.main import main
        assert main(["--data-dir", str(data_dir), "add",
                     "--id", "4", "--name", "Eve", "--status", "Inactive"]) == 0
        capsys.readouterr()
        assert main(["--data-dir", str(data_dir), "list", "--status", "Inactive"]) == 0
        out = capsys.readouterr().out
        assert "Eve" in out and "Brian" in out

    def test_invalid_add_returns_one(self, data_dir, capsys):
        from employee_demo.cli.main import main
        assert main(["--data-dir", str(data_dir), "add",
                     "--id", "-2", "--name", "Eve", "--status", "Active"]) == 1
        assert "cannot be 0 or negative" in capsys.readouterr().err

    def test_statuses_does_not_need_data(self, tmp_path, capsys):
        from employee_demo.cli.main import main
        assert main(["--data-dir", str(tmp_path), "statuses"]) == 0
        assert "Active" in capsys.readouterr().out
