import pytest

from flappy_box.config import PRESETS, DifficultyConfig, get_preset
from flappy_box.data_models import RestartPolicy


def test_defaults_match_classic():
    assert get_preset("classic") == DifficultyConfig()
    cfg = DifficultyConfig()
    assert (cfg.base_speed, cfg.max_speed, cfg.speed_increment) == (3.0, 7.0, 0.4)
    assert (cfg.base_spawn_interval, cfg.min_spawn_interval) == (90, 45)
    assert cfg.score_step == 3
    assert cfg.restart_policy is RestartPolicy.PLAY_IMMEDIATELY


def test_presets_cover_observed_score_steps():
    assert {p.score_step for p in PRESETS.values()} == {3, 5, 10}


def test_unknown_preset():
    with pytest.raises(KeyError, match="classic"):
        get_preset("nightmare")


@pytest.mark.parametrize("changes", [
    {"max_speed": 2.0},
    {"min_spawn_interval": 0},
    {"min_spawn_interval": 100},
    {"score_step": 0},
    {"gravity_ratio": -0.1},
    {"margin_ratio": 0.5},
])
def test_invalid_tables_rejected(changes):
    with pytest.raises(ValueError):
        DifficultyConfig(**changes)


def test_with_overrides_copies():
    base = DifficultyConfig()
    tuned = base.with_overrides(score_step=10)
    assert tuned.score_step == 10
    assert base.score_step == 3
