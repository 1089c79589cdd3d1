import random

from validate_scrambles import run_validation


def test_scrambles_validate_and_restore():
    results = run_validation(num_scrambles=200, scramble_length=25, rng=random.Random(9))
    assert results["tested"] == 200
    assert results["valid"] == 200
    assert results["invalid"] == 0
    assert results["centers_moved"] == 0
    assert results["not_restored"] == 0
    assert results["failures"] == []


def test_progress_output(capsys):
    run_validation(num_scrambles=10, scramble_length=5, rng=random.Random(1), freq_of_outputs=5)
    out = capsys.readouterr().out
    assert "Progress: 5/10" in out
    assert "Progress: 10/10" in out
