"""Tests for detergent format reference data."""

import pytest

from dishmate.detergent.formats import (
    PODS_BEAT_LIQUID_REASON,
    POWDER_WINS_DEFAULT_REASON,
    POWDER_WINS_REASONS,
    SIMILAR_FORMATS_REASON,
    compare_formats,
    get_all_detergent_formats,
    get_detergent_format_info,
    get_why_powder_beats_pods,
)
from dishmate.types import DetergentFormat


def test_format_info():
    """Test that only powder and liquid can be dosed for the pre-wash."""
    prewash_capable = {info.format for info in get_all_detergent_formats() if info.prewash_capable}

    assert prewash_capable == {DetergentFormat.POWDER, DetergentFormat.LIQUID}
    assert get_detergent_format_info("pods").cost_per_wash == "$0.25-0.50"


@pytest.mark.parametrize("other", [DetergentFormat.PODS, DetergentFormat.LIQUID, DetergentFormat.TABLETS])
def test_powder_always_wins(other):
    """Test that powder wins whichever side it is on."""
    assert compare_formats(DetergentFormat.POWDER, other).winner == DetergentFormat.POWDER
    assert compare_formats(other, DetergentFormat.POWDER).winner == DetergentFormat.POWDER


def test_powder_reasons():
    """Test the reason text depends on the losing format."""
    assert compare_formats("pods", "powder").why_winner == POWDER_WINS_REASONS[DetergentFormat.PODS]
    assert compare_formats("powder", "tablets").why_winner == POWDER_WINS_DEFAULT_REASON


def test_pods_beat_liquid():
    """Test pods over liquid in either order."""
    assert compare_formats("liquid", "pods").winner == DetergentFormat.PODS
    assert compare_formats("pods", "liquid").why_winner == PODS_BEAT_LIQUID_REASON


def test_other_pairs_go_to_first_format():
    """Test that any other pairing picks the first argument."""
    assert compare_formats("tablets", "liquid").winner == DetergentFormat.TABLETS
    assert compare_formats("liquid", "tablets").winner == DetergentFormat.LIQUID
    assert compare_formats("pods", "tablets").why_winner == SIMILAR_FORMATS_REASON


def test_why_powder_beats_pods():
    """Test the explainer content."""
    explanation = get_why_powder_beats_pods()

    assert explanation.headline == "Why Powder Beats Pods"
    assert len(explanation.key_points) == 5
