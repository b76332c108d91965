from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from brochurecost.config import load_config
from brochurecost.models import Tier
from brochurecost.price_tables import COLOR_TIERS, DEFAULT_SCHEDULE, TierTableError


def test_defaults_without_env():
    cfg = load_config({}, None)
    assert cfg.language == "de"
    assert cfg.verbose is False
    assert cfg.mono_tiers_path is None
    assert cfg.output_dir == (cfg.base_dir / "outputs").resolve()
    assert cfg.price_schedule() == DEFAULT_SCHEDULE


def test_env_values_are_read(tmp_path: Path):
    env = {
        "BROCHURE_LANGUAGE": " EN ",
        "BROCHURE_OUTPUT_DIR": str(tmp_path),
        "BROCHURE_VERBOSE": "yes",
    }
    cfg = load_config(env, None)
    assert cfg.language == "en"
    assert cfg.output_dir == tmp_path.resolve()
    assert cfg.verbose is True


def test_unknown_language_falls_back():
    assert load_config({"BROCHURE_LANGUAGE": "fr"}).language == "de"


def test_cli_overrides_env(tmp_path: Path):
    env = {"BROCHURE_LANGUAGE": "en", "BROCHURE_OUTPUT_DIR": str(tmp_path / "env")}
    args = SimpleNamespace(language="de", output_dir=str(tmp_path / "cli"), verbose=True)
    cfg = load_config(env, args)
    assert cfg.language == "de"
    assert cfg.output_dir == (tmp_path / "cli").resolve()
    assert cfg.verbose is True


def test_tier_paths_feed_price_schedule(tmp_path: Path):
    mono = tmp_path / "mono.csv"
    mono.write_text("min_quantity,unit_price\n10,0.08\n1,0.12\n", encoding="utf-8")
    cfg = load_config({"BROCHURE_MONO_TIERS": str(mono)})
    schedule = cfg.price_schedule()
    assert schedule.mono_tiers == (Tier(10, 0.08), Tier(1, 0.12))
    assert schedule.color_tiers == COLOR_TIERS


def test_missing_tier_file_raises(tmp_path: Path):
    args = SimpleNamespace(color_tiers=str(tmp_path / "nope.csv"))
    cfg = load_config({}, args)
    with pytest.raises(TierTableError):
        cfg.price_schedule()
