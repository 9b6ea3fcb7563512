"""Tests for ParserOptions."""

import dataclasses

import pytest

from thetha_core.options import DEFAULT_ENCODING, DEFAULT_MAX_DEPTH, ParserOptions


def test_defaults():
    opts = ParserOptions()
    assert opts.max_depth == DEFAULT_MAX_DEPTH
    assert opts.encoding == DEFAULT_ENCODING

@pytest.mark.parametrize("depth", [0, -1])
def test_invalid_depth(depth):
    with pytest.raises(ValueError):
        ParserOptions(max_depth=depth)

def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ParserOptions().max_depth = 3
