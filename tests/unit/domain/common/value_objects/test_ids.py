import pytest

from usercrud.domain.common.exceptions import ValidationError
from usercrud.domain.common.value_objects.ids import UserId


def test_user_id_wraps_positive_int() -> None:
    """Test creating a valid identifier."""
    user_id = UserId(5)

    assert user_id.value == 5
    assert str(user_id) == "5"


@pytest.mark.parametrize("value", [0, -1, -100])
def test_non_positive_user_id_raises_error(value: int) -> None:
    """Test that identifiers must be strictly greater than zero."""
    with pytest.raises(ValidationError, match="must be positive"):
        UserId(value)


@pytest.mark.parametrize("value", [None, "1", 1.0, True])
def test_non_int_user_id_raises_error(value: object) -> None:
    """Test that only plain integers are identifiers."""
    with pytest.raises(ValidationError, match="must be an integer"):
        UserId(value)  # type: ignore[arg-type]


def test_user_id_equality_and_hash() -> None:
    """Test value semantics."""
    assert UserId(1) == UserId(1)
    assert UserId(1) != UserId(2)
    assert {UserId(1), UserId(1)} == {UserId(1)}


def test_user_id_is_immutable() -> None:
    """Test that identifiers cannot be changed after creation."""
    user_id = UserId(1)

    with pytest.raises(AttributeError):
        user_id.value = 2  # type: ignore[misc]
