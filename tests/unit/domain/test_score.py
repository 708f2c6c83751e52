"""Tests for the Score value object."""

from emergency_response.domain.value_objects.score import HANDLED_POINTS, UNHANDLED_PENALTY, Score


class TestScore:
    """Test Score arithmetic."""

    def test_starts_at_zero(self):
        assert Score().value == 0

    def test_award_adds_ten(self):
        """Test a handled incident is worth ten points."""
        assert HANDLED_POINTS == 10
        assert Score().award().value == 10

    def test_penalize_subtracts_five(self):
        """Test an unhandled incident costs five points."""
        assert UNHANDLED_PENALTY == 5
        assert Score().penalize().value == -5

    def test_operations_return_new_instances(self):
        """Test the original score is left untouched."""
        score = Score(20)

        awarded = score.award()

        assert score.value == 20
        assert awarded.value == 30
        assert awarded is not score

    def test_str(self):
        assert str(Score(15)) == "15"
