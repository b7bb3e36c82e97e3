from __future__ import annotations

from datetime import datetime, timezone

from morphicon import Transition

from scripts import render_gallery


def test_isoformat_uses_zulu_suffix():
    stamp = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    assert render_gallery._isoformat(stamp) == "2024-05-01T12:30:00Z"


def test_gallery_covers_every_transition():
    names = [case["name"] for case in render_gallery.CASES]
    assert len(names) == len(set(names))
    morphs = {
        frozenset(case["args"][1:3])
        for case in render_gallery.CASES
        if case["args"][0] == "animate"
    }
    for transition in Transition:
        assert frozenset((transition.first.value, transition.second.value)) in morphs


def test_package_docstring_is_plain_ascii():
    import morphicon

    assert morphicon.__doc__.isascii()
    assert morphicon.__version__ == "0.1.0"
