import pytest

from phylohasse.config import HasseConfig


def test_defaults():
    config = HasseConfig()
    assert config.reduction == "single_pass"
    assert config.verbose is False


def test_full_reduction_mode():
    assert HasseConfig(reduction="full").reduction == "full"


def test_unknown_reduction_mode():
    with pytest.raises(ValueError):
        HasseConfig(reduction="fixpoint")
