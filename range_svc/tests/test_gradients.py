"""
Unit tests for boundary gradient composition.
"""
from services.ranges.gradients import band_color, compose_gradients
from services.ranges.models import Band


class TestBandColor:

    def test_status_color(self):
        assert band_color(Band(low=0, high=1, status="Good")) == "#72C13B"

    def test_band_override(self):
        assert band_color(Band(low=0, high=1, status="Good", color="#ABCDEF")) == "#ABCDEF"

    def test_unknown_status(self):
        assert band_color(Band(low=0, high=1, status="Mystery")) == "#FBAD37"


class TestComposeGradients:

    def test_ascending_order_and_blend_stops(self, vitamin_d_bands):
        gradients = compose_gradients(vitamin_d_bands)
        assert [g.band.label for g in gradients] == ["Deficient", "Insufficient", "Optimal", "High", "Toxic"]

        first = gradients[0]
        assert [(s.color, s.position) for s in first.stops] == [("#B2302E", 80.0), ("#D8D800", 100.0)]

    def test_last_band_is_solid(self, low_ok_high_bands):
        last = compose_gradients(low_ok_high_bands)[-1]
        assert last.is_solid
        assert last.to_css() == "#FBAD37"

    def test_css(self):
        bands = [Band(low=None, high=10, status="Good"), Band(low=10, high=None, status="Ok")]
        gradients = compose_gradients(bands)
        assert gradients[0].to_css() == "linear-gradient(to right, #72C13B 80%, #D8D800 100%)"
        assert gradients[1].to_css() == "#D8D800"

    def test_single_band(self):
        gradients = compose_gradients([Band(low=0, high=10, status="Excellent")])
        assert len(gradients) == 1
        assert gradients[0].to_css() == "#37B45E"

    def test_empty(self):
        assert compose_gradients([]) == []
