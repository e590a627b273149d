"""
Tests for the dashboard command line entry point
"""

import orjson
import pytest

from run_dashboard import main
from spa_admin.config import get_config


@pytest.fixture(autouse=True)
def _logging(clean_logging):
    yield


class TestMain:
    def test_json_output(self, capsys):
        assert main(["--today", "2026-10-19", "--json"]) == 0

        data = orjson.loads(capsys.readouterr().out)
        assert data["summary"]["todays_appointments"] == 2
        assert data["summary"]["totals"]["balance"] == 830
        assert data["birthdays"] == ["María Gonzalez"]
        assert [p["id"] for p in data["lowStock"]] == ["2"]
        assert [a["time"] for a in data["agenda"]] == ["10:00", "14:30"]
        assert len(data["clients"]) == 3

    def test_text_summary(self, capsys):
        assert main(["--today", "2026-10-19"]) == 0

        out = capsys.readouterr().out
        assert "Balance: $830.00" in out
        assert "Ingresos mensuales: $1,150.00" in out
        assert "María Gonzalez: cita de regalo disponible hoy" in out
        assert "Mascarilla de Arcilla: 3 Tarro 200g (mínimo 10)" in out
        assert "2023-10-10  -$200.00  Pago de servicios públicos" in out
        assert "2023-10-05  +$800.00  Servicios de Spa" in out

    def test_search(self, capsys):
        argv = ["--today", "2026-10-19", "--json", "--search", "RUIZ"]
        assert main(argv) == 0

        data = orjson.loads(capsys.readouterr().out)
        assert [c["name"] for c in data["clients"]] == ["Carla Ruiz"]

    def test_empty_store(self, capsys):
        assert main(["--no-demo"]) == 0

        out = capsys.readouterr().out
        assert "No hay citas programadas." in out
        assert "Balance: $0.00" in out

    def test_missing_seed_fails(self, tmp_path, capsys):
        assert main(["--seed", str(tmp_path / "missing.json")]) == 1
        assert "Dashboard failed" in capsys.readouterr().err

    def test_missing_seed_from_environment_fails(
        self, tmp_path, monkeypatch, capsys
    ):
        """A configured seed that does not exist is logged, not raised"""
        monkeypatch.setenv("SEED__SEED_FILE", str(tmp_path / "missing.json"))
        get_config.cache_clear()
        try:
            assert get_config().seed.seed_file == tmp_path / "missing.json"
            assert main([]) == 1
        finally:
            get_config.cache_clear()

        assert "Dashboard failed" in capsys.readouterr().err
