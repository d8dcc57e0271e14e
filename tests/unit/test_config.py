"""Unit tests for employee_demo/config.py"""

from pathlib import Path


class TestStoreConfig:

    def test_file_names(self, tmp_path):
        from employee_demo.config import StoreConfig
        cfg = StoreConfig(data_dir=tmp_path)
        assert cfg.csv_path == tmp_path / "employees.csv"
        assert cfg.json_path == tmp_path / "employees.json"

    def test_env_var_sets_default_dir(self, tmp_path, monkeypatch):
        from employee_demo.config import DATA_DIR_ENV, StoreConfig
        monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
        assert StoreConfig().data_dir == tmp_path

    def test_falls_back_to_home_dir(self, monkeypatch):
        from employee_demo.config import DATA_DIR_ENV, StoreConfig
        monkeypatch.delenv(DATA_DIR_ENV, raising=False)
        assert StoreConfig().data_dir == Path("~/.employee-demo").expanduser()

    def test_explicit_dir_beats_env(self, tmp_path, monkeypatch):
        from employee_demo.config import DATA_DIR_ENV, StoreConfig
        monkeypatch.setenv(DATA_DIR_ENV, "/somewhere/else")
        assert StoreConfig.from_args(str(tmp_path)).data_dir == tmp_path

    def test_from_args_without_dir_uses_env(self, tmp_path, monkeypatch):
        from employee_demo.config import DATA_DIR_ENV, StoreConfig
        monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
        assert StoreConfig.from_args(None).data_dir == tmp_path

    def test_string_dir_is_coerced_to_path(self, tmp_path):
        from employee_demo.config import StoreConfig
        assert isinstance(StoreConfig(data_dir=str(tmp_path)).data_dir, Path)
