import pytest

from swissdraw.exceptions import (
    CompetitorNotFoundException,
    InvalidCompetitorDataException,
    InvalidMarginException,
)
from swissdraw.models import Competitor
from swissdraw.utils.validation import (
    require_in_pool,
    validate_margin,
    validate_margin_strict,
    validate_name,
    validate_name_strict,
)


def test_valid_margins():
    for margin in (0, 1, 10):
        result = validate_margin(margin)
        assert result
        assert result.sanitized_value == margin


def test_invalid_margins():
    for margin in (-1, 1.5, "1", None, True):
        result = validate_margin(margin)
        assert not result
        assert result.error_message


def test_strict_margin_raises():
    assert validate_margin_strict(2) == 2
    with pytest.raises(InvalidMarginException):
        validate_margin_strict(-3)


def test_name_validation():
    assert validate_name("  Ada ").sanitized_value == "Ada"
    assert not validate_name("   ")
    with pytest.raises(InvalidCompetitorDataException):
        validate_name_strict("")


def test_require_in_pool():
    pool = [Competitor(id="a", name="A")]
    require_in_pool("a", pool)
    with pytest.raises(CompetitorNotFoundException):
        require_in_pool("b", pool)
