"""Pytest configuration and shared fixtures for the zettelsx test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from zettelsx.attrs import Attributes
from zettelsx.build import (
    make_block,
    make_cell,
    make_format,
    make_heading,
    make_link,
    make_list_node,
    make_para,
    make_reference,
    make_soft,
    make_table,
    make_text,
)
from zettelsx.sx import Pair, make_list
from zettelsx.symbols import SYM_FORMAT_EMPH, SYM_LIST_UNORDERED, SYM_REFSTATE_EXTERNAL

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based fuzzing tests")


@pytest.fixture
def sample_zettel() -> Pair:
    """Provide a small zettel covering the common block and inline kinds.

    Returns
    -------
    Pair
        ``(BLOCK heading para list table)`` node tree

    """
    heading = make_heading(1, None, make_list(make_text("Title")), "title", "title")
    para = make_para(
        make_text("Hello"),
        make_soft(),
        make_format(SYM_FORMAT_EMPH, None, make_list(make_text("world"))),
        make_link(
            Attributes({"title": "home"}).as_assoc(),
            make_reference(SYM_REFSTATE_EXTERNAL, "https://zettelstore.de"),
            make_list(make_text("link")),
        ),
    )
    items = make_list(
        make_block(make_para(make_text("one"))),
        make_block(make_para(make_text("two"))),
    )
    bullets = make_list_node(SYM_LIST_UNORDERED, None, items)
    table = make_table(
        None,
        make_list(make_cell(None, make_list(make_text("h1"))), make_cell(None, make_list(make_text("h2")))),
        make_list(make_cell(None, make_list(make_text("a"))), make_cell(None, make_list(make_text("b")))),
    )
    return make_block(heading, para, bullets, table)
