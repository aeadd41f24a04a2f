import pytest
import torch

from cranes.grid.types import CellKind
from cranes.grid.generator import GridConfig, generate_grid, generate_grids, sample_cells


def test_seeded_generation_is_reproducible():
    cfg = GridConfig(rows=5, columns=6)
    a = generate_grids(16, cfg, generator=torch.Generator().manual_seed(7))
    b = generate_grids(16, cfg, generator=torch.Generator().manual_seed(7))
    assert a == b


def test_shapes_and_origin_clear():
    device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    cfg = GridConfig(rows=3, columns=4, building_prob=0.5, crane_prob=0.5)
    cells = sample_cells(64, cfg, device)
    assert cells.shape == (64, 3, 4)
    assert torch.all(cells[:, 0, 0] == int(CellKind.EMPTY))


def test_extreme_probabilities():
    g = generate_grid(GridConfig(rows=3, columns=3, building_prob=1.0, crane_prob=0.0))
    assert g.count(CellKind.BUILDING) == 8
    assert g.get(0, 0) == CellKind.EMPTY

    g = generate_grid(GridConfig(rows=3, columns=3, building_prob=0.0, crane_prob=1.0))
    assert g.count(CellKind.CRANE) == 8


def test_invalid_configs():
    with pytest.raises(ValueError):
        generate_grid(GridConfig(rows=0, columns=3))
    with pytest.raises(ValueError):
        generate_grid(GridConfig(building_prob=-0.1))
    with pytest.raises(ValueError):
        generate_grid(GridConfig(building_prob=0.7, crane_prob=0.5))


def test_global_seed_generator_reproducible():
    from cranes.utils.seed import SeedConfig, set_global_seed, get_torch_device

    cfg = GridConfig(rows=4, columns=4)
    seed = SeedConfig(value=99, deterministic=False)
    a = generate_grids(8, cfg, generator=set_global_seed(seed))
    b = generate_grids(8, cfg, generator=set_global_seed(seed))
    assert a == b
    assert get_torch_device("cpu").type == "cpu"


def test_deterministic_flag_is_set_and_restored():
    from cranes.utils.seed import SeedConfig, set_global_seed

    before = torch.are_deterministic_algorithms_enabled()
    try:
        set_global_seed(SeedConfig(value=1, deterministic=True))
        assert torch.are_deterministic_algorithms_enabled()
    finally:
        torch.use_deterministic_algorithms(before)
    assert torch.are_deterministic_algorithms_enabled() == before
