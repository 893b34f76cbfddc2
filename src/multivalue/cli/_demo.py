"""``multivalue demo`` — build and print a sample dictionary."""

import argparse

from multivalue.dictionary import MultiValueDictionary

# key -> number of values, as in the classic playground sample
SAMPLE_SIZES = (("key1", 3), ("key2", 4), ("key3", 5))


def build_sample() -> MultiValueDictionary[str, str]:
    """Return the sample dictionary: ``keyN`` holds ``"keyN: ValueM"`` values."""
    sample: MultiValueDictionary[str, str] = MultiValueDictionary()
    for key, count in SAMPLE_SIZES:
        for index in range(1, count + 1):
            sample.add_element(key, f"{key}: Value{index}")
    return sample


def run_demo(args: argparse.Namespace) -> None:
    """Print the sample's repr, then every ``(key, value)`` pair."""
    sample = build_sample()
    print(repr(sample))
    for pair in sample:
        print(pair)
