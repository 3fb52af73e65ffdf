"""Tests for the compute_routes command-line script."""

import importlib.util
import json
from pathlib import Path

import pytest

from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "compute_routes.py"


@pytest.fixture(scope="module")
def compute_routes():
    """Load the script as a module."""
    module_spec = importlib.util.spec_from_file_location("compute_routes", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def clean_router_env(monkeypatch) -> None:
    for name in ("ROUTER_MAX_HOPS", "ROUTER_MAX_SPLIT_ROUTES", "ROUTER_OPTIMISTIC_CACHED_ROUTES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(
        json.dumps(
            {
                "blockNumber": 12345,
                "tokens": [
                    {"address": TOKEN_A, "symbol": "A"},
                    {"address": TOKEN_B, "symbol": "B"},
                    {"address": TOKEN_C, "symbol": "C"},
                ],
                "pools": [
                    {"kind": "v2", "token0": TOKEN_A, "token1": TOKEN_B},
                    {"kind": "v3", "token0": TOKEN_B, "token1": TOKEN_C, "fee": 500},
                    {"kind": "v3", "token0": TOKEN_A, "token1": TOKEN_C},
                ],
            }
        )
    )
    return path


class TestComputeRoutesScript:
    """Tests for the route explorer CLI."""

    def test_prints_routes_and_block(self, compute_routes, snapshot_path, capsys) -> None:
        code = compute_routes.main(
            [str(snapshot_path), "--token-in", TOKEN_A, "--token-out", TOKEN_C]
        )

        out = capsys.readouterr().out
        assert code == 0
        assert "Snapshot block: 12345" in out
        assert "Found 2 routes" in out
        assert "[V3] A" in out
        assert "[MIXED] A" in out

    def test_missing_snapshot(self, compute_routes, tmp_path, capsys) -> None:
        code = compute_routes.main(
            [str(tmp_path / "missing.json"), "--token-in", TOKEN_A, "--token-out", TOKEN_C]
        )

        assert code == 1
        assert "Snapshot not found" in capsys.readouterr().out

    def test_invalid_json(self, compute_routes, tmp_path, capsys) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        code = compute_routes.main([str(path), "--token-in", TOKEN_A, "--token-out", TOKEN_C])

        assert code == 1
        assert "not valid JSON" in capsys.readouterr().out

    def test_invalid_document(self, compute_routes, tmp_path, capsys) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"pools": "nope"}))

        code = compute_routes.main([str(path), "--token-in", TOKEN_A, "--token-out", TOKEN_C])

        assert code == 1
        assert "Invalid snapshot document" in capsys.readouterr().out

    def test_invalid_token_address(self, compute_routes, snapshot_path, capsys) -> None:
        code = compute_routes.main(
            [str(snapshot_path), "--token-in", "0x1234", "--token-out", TOKEN_C]
        )

        assert code == 1
        assert "Error" in capsys.readouterr().out
