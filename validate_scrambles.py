import random
import time

import numpy as np

from cube import apply_moves, invert_sequence
from state import create_solved_cube, state_vector, validate_cube, CENTER, FACELETS_PER_FACE
from scramble import generate_scramble
from util import format_time

#configuration
num_scrambles = 10000
scramble_length = 20
freq_of_outputs = 1000
seed = None

CENTER_IDS = np.arange(CENTER, 54, FACELETS_PER_FACE)


def run_validation(num_scrambles=num_scrambles, scramble_length=scramble_length,
                   rng=None, freq_of_outputs=None):
    """Scramble solved cubes and check that nothing but a permutation happened.

    Every scramble must validate, keep the centers in place, keep 9 stickers of
    each color and come back to the solved cube when the inverse is played.
    """
    rng = rng or random.Random(seed)
    solved = create_solved_cube()
    solved_vector = state_vector(solved)
    expected_counts = np.bincount(solved_vector, minlength=7)

    results = {"tested": 0, "valid": 0, "invalid": 0,
               "centers_moved": 0, "not_restored": 0, "failures": []}

    for i in range(num_scrambles):
        scramble = generate_scramble(scramble_length, rng=rng)
        scrambled = apply_moves(solved, scramble)
        vector = state_vector(scrambled)
        results["tested"] += 1

        ok = validate_cube(scrambled).valid and np.array_equal(
            np.bincount(vector, minlength=7), expected_counts)
        if ok:
            results["valid"] += 1
        else:
            results["invalid"] += 1

        if not np.array_equal(vector[CENTER_IDS], solved_vector[CENTER_IDS]):
            results["centers_moved"] += 1
            ok = False

        restored = apply_moves(scrambled, invert_sequence(scramble))
        if not np.array_equal(state_vector(restored), solved_vector):
            results["not_restored"] += 1
            ok = False

        if not ok:
            results["failures"].append(" ".join(scramble))

        if freq_of_outputs and (i + 1) % freq_of_outputs == 0:
            print(f"  Progress: {i+1}/{num_scrambles} (Valid: {results['valid']}, Invalid: {results['invalid']}, "
                  f"Centers moved: {results['centers_moved']}, Not restored: {results['not_restored']})")

    return results


if __name__ == "__main__":
    print(f"Testing {num_scrambles} scrambles of length {scramble_length}...")
    start_time = time.time()
    results = run_validation(freq_of_outputs=freq_of_outputs)

    print(f"\n{'='*70}")
    print(f"RESULTS")
    print(f"{'='*70}")
    print(f"Tested: {results['tested']} in {format_time(time.time() - start_time)}")
    print(f"  Valid: {results['valid']}")
    print(f"  Invalid: {results['invalid']}")
    print(f"  Centers moved: {results['centers_moved']}")
    print(f"  Not restored by inverse: {results['not_restored']}")

    failures = results["failures"]
    if failures:
        print(f"\n{'='*70}")
        print(f"FAILING SCRAMBLES ({len(failures)} total):")
        print(f"{'='*70}")
        for scramble in failures[:20]:  # Show first 20
            print(f"  {scramble}")
        if len(failures) > 20:
            print(f"  ... and {len(failures) - 20} more")

    print("\n" + ("✓ PASSED" if not failures else f"✗ FAILED - {len(failures)} scrambles"))
