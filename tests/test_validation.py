"""Tests for prompt input validation."""
import pytest
from gitconvcommit.commit_message.validation import (
    AcceptHandler,
    MaxLengthHandler,
    NotEmptyHandler,
    create_scope_chain,
    create_short_description_chain,
)
from gitconvcommit.commit_message.validator import ScopeValidator, ShortDescriptionValidator


def test_max_length_handler():
    handler = MaxLengthHandler(max_length=10)

    is_valid, msg = handler.validate("This is way too long")
    assert not is_valid
    assert msg == "This message is too long"

    is_valid, msg = handler.validate("1234567890")
    assert is_valid

    is_valid, msg = handler.validate("short")
    assert is_valid


def test_not_empty_handler():
    handler = NotEmptyHandler("Nothing entered")

    is_valid, msg = handler.validate("")
    assert not is_valid
    assert msg == "Nothing entered"

    is_valid, msg = handler.validate("   ")
    assert not is_valid

    is_valid, msg = handler.validate("api")
    assert is_valid


def test_chain_stops_at_first_failure():
    chain = NotEmptyHandler("empty", MaxLengthHandler(3))

    assert chain.handle("") == (False, "empty")
    assert chain.handle("abcd") == (False, "This message is too long")
    assert chain.handle("abc") == (True, "")


def test_accept_handler():
    assert AcceptHandler().handle("") == (True, "")


def test_short_description_chain_boundary():
    chain = create_short_description_chain(50)

    assert chain.handle("x" * 50) == (True, "")
    is_valid, msg = chain.handle("x" * 51)
    assert not is_valid
    assert msg == "This message is too long"


@pytest.mark.parametrize("length", [0, 1, 25, 49, 50])
def test_short_description_validator_accepts(length):
    assert ShortDescriptionValidator()("a" * length) == (True, "")


@pytest.mark.parametrize("length", [51, 52, 100])
def test_short_description_validator_rejects(length):
    assert ShortDescriptionValidator()("a" * length) == (False, "This message is too long")


def test_short_description_counts_characters():
    assert ShortDescriptionValidator(max_length=5)("ééééé") == (True, "")


def test_scope_validator():
    required = ScopeValidator(required=True)
    assert required("")[0] is False
    assert required("   ") == (False, "Scope cannot be empty")
    assert required("api") == (True, "")

    optional = ScopeValidator(required=False)
    assert optional("") == (True, "")


def test_scope_chain_defaults_to_required():
    assert create_scope_chain().handle("")[0] is False
