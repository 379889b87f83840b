import pytest

import viz.renderer_colors as theme


def test_parse_hex_rgb_and_rgba():
    assert theme.parse_hex("#ff8000") == (255, 128, 0, 1.0)
    r, g, b, a = theme.parse_hex("#3fff3f00")
    assert (r, g, b) == (63, 255, 63)
    assert a == 0.0

def test_parse_hex_falls_back_to_green():
    assert theme.parse_hex("red") == (0, 255, 0, 1.0)
    assert theme.parse_hex("#zzzzzz") == (0, 255, 0, 1.0)

def test_blend_endpoints():
    assert theme.blend_colors("#000000", "#ffffff", 0.0) == (0, 0, 0, 1.0)
    assert theme.blend_colors("#000000", "#ffffff", 1.0) == (255, 255, 255, 1.0)

def test_blend_interpolates_alpha():
    r, g, b, a = theme.blend_colors("#00000000", "#c8c8c8ff", 0.25)
    assert (r, g, b) == (50, 50, 50)
    assert a == pytest.approx(0.25)

def test_gradient_ramp_runs_tail_to_head():
    ramp = theme.gradient_ramp(5, "#3fff3f00", "#00ff00")
    assert len(ramp) == 5
    assert ramp[0] == (63, 255, 63, 0.0)
    assert ramp[-1] == (0, 255, 0, 1.0)
    alphas = [c[3] for c in ramp]
    assert alphas == sorted(alphas)

def test_gradient_ramp_short_bodies():
    assert theme.gradient_ramp(0) == []
    assert theme.gradient_ramp(1, "#00000000", "#00ff00") == [(0, 255, 0, 1.0)]

def test_to_pg_scales_alpha():
    assert theme.to_pg((1, 2, 3, 1.0)) == (1, 2, 3, 255)
    assert theme.to_pg((1, 2, 3, 0.0)) == (1, 2, 3, 0)
