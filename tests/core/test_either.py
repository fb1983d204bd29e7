import pytest

from image_uploads.core.models.errors import InvalidFileFormatError
from image_uploads.core.utils.either import (
    Either,
    is_left,
    is_right,
    make_left,
    make_right,
    unwrap_either,
)


class TestEither:
    def test_make_right(self) -> None:
        result = make_right(100)

        assert is_right(result)
        assert not is_left(result)
        assert unwrap_either(result) == 100

    def test_make_left(self) -> None:
        error = InvalidFileFormatError()
        result = make_left(error)

        assert is_left(result)
        assert not is_right(result)
        assert unwrap_either(result) is error

    def test_falsy_values_are_still_populated(self) -> None:
        assert is_right(make_right(None))
        assert unwrap_either(make_right(0)) == 0
        assert unwrap_either(make_left("")) == ""

    def test_unwrap_both_sides_raises(self) -> None:
        result: Either[str, int] = Either(left="boom", right=1)

        with pytest.raises(RuntimeError, match="both left and right"):
            unwrap_either(result)

    def test_unwrap_neither_side_raises(self) -> None:
        with pytest.raises(RuntimeError, match="no left or right"):
            unwrap_either(Either())

    def test_either_is_immutable(self) -> None:
        result = make_right(1)

        with pytest.raises(AttributeError):
            result.right = 2  # type: ignore[misc]
