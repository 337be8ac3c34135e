import pathlib

import pytest

from config import DEFAULT_MAX_ITERATIONS, Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.max_iterations == DEFAULT_MAX_ITERATIONS == 1000
    assert s.event_log is None


def test_load_yaml(tmp_path):
    cfg = tmp_path / "life.yaml"
    cfg.write_text("max_iterations: 50\nevent_log: logs/events.log\ndensity: 0.25\nseed: 9\n")
    s = load_settings(cfg)
    assert s.max_iterations == 50
    assert s.event_log == pathlib.Path("logs/events.log")
    assert s.density == 0.25
    assert s.seed == 9


def test_load_none_and_empty(tmp_path):
    assert load_settings(None) == Settings()
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_settings(empty) == Settings()


@pytest.mark.parametrize(
    "text",
    [
        "max_iterations: 0\n",
        "max_iterations: ten\n",
        "density: 2\n",
        "colour: blue\n",
        "- just\n- a list\n",
        "max_iterations: [1\n",      # broken YAML
        "density: high\n",
        "density: true\n",
        "event_log: 5\n",
        "event_log: [a, b]\n",
    ],
)
def test_invalid_files(tmp_path, text):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(text)
    with pytest.raises(ValueError):
        load_settings(cfg)


def test_merged_overrides_only_given_values():
    base = Settings(max_iterations=20, seed=3)
    merged = base.merged(max_iterations=None, seed=5, event_log="x.log")
    assert merged.max_iterations == 20
    assert merged.seed == 5
    assert merged.event_log == pathlib.Path("x.log")


def test_to_dict_roundtrip():
    s = Settings(event_log=pathlib.Path("a/b.log"))
    assert Settings.from_dict(s.to_dict()) == s
