import pytest
from wordhint.game import create_chooser, get_chooser_ids, register, BaseChooser


def test_registry_lists_builtin_choosers():
    assert get_chooser_ids() == ["plural_skip", "uniform"]
    with pytest.raises(ValueError):
        create_chooser("nope")


def test_uniform_is_reproducible_by_seed():
    words = ["crane", "stack", "truck", "class"]
    a = create_chooser("uniform", seed=3)
    b = create_chooser("uniform", seed=3)
    picks = [a(words) for _ in range(20)]
    assert picks == [b(words) for _ in range(20)]
    assert set(picks) <= set(words)


def test_plural_skip_always_keeps_non_plurals():
    words = ["boots", "cats", "crane"]
    c = create_chooser("plural_skip", seed=1, keep_probability=1e-9)
    assert {c(words) for _ in range(50)} == {"crane"}


def test_plural_skip_keeps_plurals_sometimes():
    c = create_chooser("plural_skip", seed=5)
    picks = [c(["boots", "crane"]) for _ in range(600)]
    share = picks.count("boots") / len(picks)
    # Expected 1/3 : 1 odds -> 0.25
    assert 0.15 < share < 0.35


def test_plural_skip_rejects_bad_probability():
    with pytest.raises(ValueError):
        create_chooser("plural_skip", keep_probability=0)


def test_empty_dictionary_raises():
    with pytest.raises(ValueError):
        create_chooser("uniform")([])


def test_register_requires_unique_id():
    with pytest.raises(ValueError):
        @register
        class Dup(BaseChooser):
            id = "uniform"
