"""Unit tests for hookscan.helpers.exceptions module."""

import pytest

from hookscan.helpers.exceptions import ConfigError, HookscanError, SourceParseError, SourceRootError


class TestExceptionHierarchy:
    """Every deliberate error derives from HookscanError."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", [SourceRootError, ConfigError])
    def test_subclasses_base(self, error_cls) -> None:
        assert issubclass(error_cls, HookscanError)

    @pytest.mark.unit
    def test_source_root_error_can_be_caught_as_base(self) -> None:
        """SourceRootError should be catchable as HookscanError."""
        with pytest.raises(HookscanError, match="missing"):
            raise SourceRootError("missing")


class TestSourceParseError:
    """Tests for SourceParseError."""

    @pytest.mark.unit
    def test_stores_path_and_reason(self) -> None:
        error = SourceParseError("src/App.tsx", "invalid start byte")

        assert error.path == "src/App.tsx"
        assert error.reason == "invalid start byte"
        assert str(error) == "Could not parse src/App.tsx: invalid start byte"

    @pytest.mark.unit
    def test_is_hookscan_error(self) -> None:
        assert isinstance(SourceParseError("a.ts", "x"), HookscanError)
