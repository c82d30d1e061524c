"""Deck parsing into typed configs."""

from __future__ import annotations

import pytest

from costcrop.config import (
    InflateStepConfig,
    KernelConfig,
    parse_grid_config,
    parse_kernel_config,
    parse_region,
    parse_step_configs,
)
from costcrop.region import Region


pytestmark = pytest.mark.unit


def test_parse_grid_config_fill_and_source() -> None:
    cfg = parse_grid_config({"grid": {"width": 10, "height": 4, "fill": 3}})
    assert (cfg.width, cfg.height, cfg.fill, cfg.source) == (10, 4, 3, None)

    src = parse_grid_config({"grid": {"source": "map.npy"}})
    assert src.source == "map.npy"

    with pytest.raises(ValueError, match="Missing required key 'height'"):
        parse_grid_config({"grid": {"width": 10}})
    with pytest.raises(ValueError, match="must be > 0"):
        parse_grid_config({"grid": {"width": 0, "height": 4}})


def test_parse_region_forms() -> None:
    assert parse_region({"x": 100, "y": 700, "w": 300, "h": 100}, "r") == Region(100, 700, 399, 799)
    assert parse_region({"min_x": 1, "min_y": 2, "max_x": 3, "max_y": 4}, "r") == Region(1, 2, 3, 4)
    with pytest.raises(ValueError, match="Missing required key 'max_y'"):
        parse_region({"min_x": 1, "min_y": 2, "max_x": 3}, "r")
    with pytest.raises(ValueError, match="r.w must be > 0"):
        parse_region({"x": 0, "y": 0, "w": 0, "h": 1}, "r")


def test_parse_kernel_config_defaults_and_errors() -> None:
    assert parse_kernel_config(None, "k") == KernelConfig()
    cfg = parse_kernel_config({"shape": "Ellipse", "size": 7}, "k")
    assert cfg.shape == "ellipse" and cfg.size == 7
    with pytest.raises(ValueError, match="positive odd"):
        parse_kernel_config({"size": 4}, "k")
    with pytest.raises(ValueError, match="must be one of"):
        parse_kernel_config({"shape": "star"}, "k")


def test_parse_step_configs() -> None:
    deck = {
        "grid": {"width": 50, "height": 50},
        "steps": [
            {"type": "disk", "center_x": 25, "center_y": 25, "radius": 10},
            {"type": "Inflate", "region": {"x": 0, "y": 0, "w": 10, "h": 10}, "inflated_value": 90},
            {"type": "export", "formats": ["NPY"]},
        ],
    }
    typed = parse_step_configs(deck)
    assert [cfg.type for cfg in typed] == ["disk", "inflate", "export"]
    inflate_cfg = typed[1]
    assert isinstance(inflate_cfg, InflateStepConfig)
    assert inflate_cfg.regions == [Region(0, 0, 9, 9)]
    assert (inflate_cfg.occupied_value, inflate_cfg.inflated_value) == (250, 90)
    assert typed[2].formats == ["npy"]


def test_parse_step_configs_rejects_bad_steps() -> None:
    with pytest.raises(ValueError, match="not supported"):
        parse_step_configs({"steps": [{"type": "blur"}]})
    with pytest.raises(ValueError, match="either 'region' or 'regions'"):
        parse_step_configs(
            {
                "steps": [
                    {
                        "type": "inflate",
                        "region": {"x": 0, "y": 0, "w": 1, "h": 1},
                        "regions": [{"x": 0, "y": 0, "w": 1, "h": 1}],
                    }
                ]
            }
        )
    with pytest.raises(ValueError, match="non-empty list"):
        parse_step_configs({"steps": []})
