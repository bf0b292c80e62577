import termios

import pytest

from sttyl.core.errors import (
    IllegalArgumentError,
    InvalidArgumentError,
    MissingArgumentError,
)
from sttyl.registry import DEFAULT_REGISTRY
from sttyl.services.resolver import OptionResolver


@pytest.fixture
def resolver():
    return OptionResolver(DEFAULT_REGISTRY)


@pytest.mark.parametrize("flag", DEFAULT_REGISTRY.flags, ids=lambda f: f.name)
def test_flag_set_and_clear_are_inverses(resolver, snapshot, flag):
    resolver.apply([flag.name], snapshot)
    assert snapshot.is_set(flag)
    once = snapshot.copy()
    resolver.apply([flag.name], snapshot)
    assert snapshot == once

    resolver.apply([f"-{flag.name}"], snapshot)
    assert not snapshot.is_set(flag)
    resolver.apply([flag.name], snapshot)
    assert snapshot == once


def test_tokens_apply_left_to_right(resolver, snapshot):
    echo = DEFAULT_REGISTRY.lookup_flag("echo")
    resolver.apply(["-echo", "echo", "-echo"], snapshot)
    assert not snapshot.is_set(echo)


def test_mixed_tokens(resolver, snapshot):
    resolver.apply(["-echo", "onlcr", "erase", "x", "kill", "@"], snapshot)
    assert not snapshot.is_set(DEFAULT_REGISTRY.lookup_flag("echo"))
    assert snapshot.is_set(DEFAULT_REGISTRY.lookup_flag("onlcr"))
    assert snapshot.char(termios.VERASE) == ord("x")
    assert snapshot.char(termios.VKILL) == ord("@")


def test_char_value_may_look_like_an_option(resolver, snapshot):
    resolver.apply(["erase", "-"], snapshot)
    assert snapshot.char(termios.VERASE) == ord("-")


def test_negated_char_option_behaves_like_plain(resolver, snapshot):
    resolver.apply(["-erase", "h"], snapshot)
    assert snapshot.char(termios.VERASE) == ord("h")


def test_missing_argument(resolver, snapshot):
    with pytest.raises(MissingArgumentError) as excinfo:
        resolver.apply(["-echo", "erase"], snapshot)
    assert str(excinfo.value) == "missing argument to 'erase'"


@pytest.mark.parametrize("value", ["ab", "", "é"])
def test_invalid_char_value(resolver, snapshot, value):
    with pytest.raises(InvalidArgumentError) as excinfo:
        resolver.apply(["erase", value], snapshot)
    assert excinfo.value.token == value


@pytest.mark.parametrize("token", ["frobnicate", "-frobnicate", "-", "Echo", "--echo"])
def test_illegal_argument_names_full_token(resolver, snapshot, token):
    with pytest.raises(IllegalArgumentError) as excinfo:
        resolver.apply([token], snapshot)
    assert str(excinfo.value) == f"illegal argument '{token}'"


def test_failure_stops_processing(resolver, snapshot):
    echoe = DEFAULT_REGISTRY.lookup_flag("echoe")
    with pytest.raises(IllegalArgumentError):
        resolver.apply(["bogus", "-echoe"], snapshot)
    assert snapshot.is_set(echoe)
