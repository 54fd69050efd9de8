"""Tests for the error taxonomy."""

import pytest

from znodetreelib.errors import (
    BadVersionError,
    Code,
    ConnectionLossError,
    KeeperError,
    NoNodeError,
    NotEmptyError,
    SessionExpiredError,
)


class TestKeeperError:

    def test_subclasses_carry_their_code(self):
        assert NoNodeError().code is Code.NONODE
        assert NotEmptyError().code is Code.NOTEMPTY
        assert BadVersionError().code is Code.BADVERSION
        assert ConnectionLossError().code is Code.CONNECTIONLOSS

    def test_default_message_names_code_and_path(self):
        error = NoNodeError(path="/a/b")
        assert error.path == "/a/b"
        assert str(error) == "NONODE for /a/b"

    @pytest.mark.parametrize("code,expected", [
        (Code.NONODE, NoNodeError),
        (Code.NOTEMPTY, NotEmptyError),
        (Code.BADVERSION, BadVersionError),
        (Code.SESSIONEXPIRED, SessionExpiredError),
    ])
    def test_create_maps_code_to_subclass(self, code, expected):
        error = KeeperError.create(code, path="/x")
        assert type(error) is expected
        assert error.path == "/x"

    def test_create_falls_back_to_tagged_base_error(self):
        error = KeeperError.create(Code.NOAUTH, path="/secret")
        assert type(error) is KeeperError
        assert error.code is Code.NOAUTH

    def test_create_rejects_ok(self):
        with pytest.raises(ValueError):
            KeeperError.create(Code.OK)

    def test_code_matches_across_catch_styles(self):
        """Matching on the subclass or on the code tag must agree."""
        try:
            raise KeeperError.create(Code.NONODE)
        except NoNodeError as error:
            assert error.code is Code.NONODE
