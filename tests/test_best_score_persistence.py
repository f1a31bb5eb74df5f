"""Best score survives restarts through the JSON save file."""
import json

from justdivide.components.intents import TileOrigin
from justdivide.constants import BEST_SCORE_KEY, DATA_DIR_ENV
from justdivide.systems import store
from justdivide.systems.best_score_system import BestScoreSystem
from tests.helpers import new_game, set_cells, set_queue


def test_missing_file_starts_from_zero_and_is_created(tmp_path):
    save_path = tmp_path / "best.json"
    bus, world, engine, flow = new_game(best_score=99)
    BestScoreSystem(world, bus, save_path=save_path)
    assert store.get_best_score(world).value == 0
    assert json.loads(save_path.read_text(encoding="utf-8")) == {BEST_SCORE_KEY: 0}


def test_best_score_is_saved_when_beaten(tmp_path):
    save_path = tmp_path / "best.json"
    bus, world, engine, flow = new_game()
    BestScoreSystem(world, bus, save_path=save_path, load_existing=False)
    set_cells(world, {0: 12})
    set_queue(world, [12, 5, 6])
    engine.place(12, TileOrigin.QUEUE, 1)
    assert json.loads(save_path.read_text(encoding="utf-8")) == {BEST_SCORE_KEY: 24}


def test_best_score_loads_in_new_session(tmp_path):
    save_path = tmp_path / "best.json"
    save_path.write_text(json.dumps({BEST_SCORE_KEY: 340}), encoding="utf-8")
    bus, world, engine, flow = new_game()
    BestScoreSystem(world, bus, save_path=save_path)
    assert store.get_best_score(world).value == 340
    flow.restart()
    assert store.get_best_score(world).value == 340


def test_corrupt_file_falls_back_to_zero(tmp_path):
    save_path = tmp_path / "best.json"
    save_path.write_text("{not json", encoding="utf-8")
    bus, world, engine, flow = new_game()
    BestScoreSystem(world, bus, save_path=save_path)
    assert store.get_best_score(world).value == 0
    assert json.loads(save_path.read_text(encoding="utf-8")) == {BEST_SCORE_KEY: 0}


def test_undecodable_file_falls_back_to_zero(tmp_path):
    save_path = tmp_path / "best.json"
    save_path.write_bytes(b"\xff\xfe\x00garbage")
    bus, world, engine, flow = new_game()
    BestScoreSystem(world, bus, save_path=save_path)
    assert store.get_best_score(world).value == 0
    assert json.loads(save_path.read_text(encoding="utf-8")) == {BEST_SCORE_KEY: 0}


def test_non_numeric_value_falls_back_to_zero(tmp_path):
    save_path = tmp_path / "best.json"
    save_path.write_text(json.dumps({BEST_SCORE_KEY: "lots"}), encoding="utf-8")
    bus, world, engine, flow = new_game()
    system = BestScoreSystem(world, bus, save_path=save_path)
    assert system.load() == 0


def test_lower_scores_do_not_rewrite_file(tmp_path):
    save_path = tmp_path / "best.json"
    save_path.write_text(json.dumps({BEST_SCORE_KEY: 500}), encoding="utf-8")
    bus, world, engine, flow = new_game()
    BestScoreSystem(world, bus, save_path=save_path)
    engine.apply_score_delta(40)
    assert json.loads(save_path.read_text(encoding="utf-8")) == {BEST_SCORE_KEY: 500}


def test_skipping_load_leaves_file_untouched(tmp_path):
    save_path = tmp_path / "best.json"
    save_path.write_text(json.dumps({BEST_SCORE_KEY: 500}), encoding="utf-8")
    bus, world, engine, flow = new_game()
    BestScoreSystem(world, bus, save_path=save_path, load_existing=False)
    assert json.loads(save_path.read_text(encoding="utf-8")) == {BEST_SCORE_KEY: 500}


def test_default_save_path_honours_data_dir_variable(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "saves"))
    bus, world, engine, flow = new_game()
    system = BestScoreSystem(world, bus)
    assert system.save_path == tmp_path / "saves" / "best_score.json"
    assert system.save_path.exists()


def test_default_save_path_lives_in_home_directory(tmp_path, monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    bus, world, engine, flow = new_game()
    system = BestScoreSystem(world, bus, load_existing=False)
    assert system.save_path == tmp_path / ".just_divide" / "best_score.json"
