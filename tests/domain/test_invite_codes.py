"""Tests for invite code generation and normalisation."""

import pytest

from discipleship.domain.exceptions import ValidationError
from discipleship.domain.invite_codes import (
    INVITE_CHARSET,
    INVITE_LENGTH,
    generate_invite_code,
    normalize_invite_code,
)


def test_generated_codes_use_the_unambiguous_alphabet():
    for _ in range(200):
        code = generate_invite_code()
        assert len(code) == INVITE_LENGTH
        assert set(code) <= set(INVITE_CHARSET)


def test_alphabet_excludes_look_alike_characters():
    for char in "0O1I":
        assert char not in INVITE_CHARSET


def test_normalize_strips_and_uppercases():
    assert normalize_invite_code("  ab3d9f ") == "AB3D9F"


@pytest.mark.parametrize("code", ["", None, "AB3D9", "AB3D9FX", "AB0D9F", "ABID9F"])
def test_normalize_rejects_malformed_codes(code):
    with pytest.raises(ValidationError):
        normalize_invite_code(code)
