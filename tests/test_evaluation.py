import logging

import pytest
import torch

from cranes.grid.generator import GridConfig, generate_grids
from cranes.grid.text_format import parse_grid
from cranes.evaluation import BenchmarkConfig, benchmark_solvers, compare_solvers
from cranes.reporting import write_markdown_report
from cranes.utils.logger import build_logger


def test_compare_solvers_agree():
    grids = generate_grids(20, GridConfig(rows=3, columns=4), generator=torch.Generator().manual_seed(3))
    result = compare_solvers(grids)
    assert result.match_rate == 1.0
    assert result.mismatches == []
    s = result.summary()
    assert s["num_grids"] == 20.0
    assert s["exhaustive_cranes_mean"] == s["dynamic_cranes_mean"]


def test_compare_solvers_summary_values():
    grids = [parse_grid("C"), parse_grid("CC\n.C\n")]
    s = compare_solvers(grids).summary()
    assert s["dynamic_cranes_max"] == 3.0
    assert s["path_length_mean"] == 1.0


def test_compare_solvers_empty_batch():
    result = compare_solvers([])
    assert result.match_rate == 1.0
    assert result.summary()["num_grids"] == 0.0


def test_benchmark_skips_large_exhaustive():
    cfg = BenchmarkConfig(warmup_iters=1, measure_iters=2, exhaustive_max_steps=2)
    timings = benchmark_solvers([(2, 2), (3, 3)], cfg=cfg, generator=torch.Generator().manual_seed(0))
    assert set(timings["exhaustive"]) == {"2x2"}
    assert set(timings["dynamic"]) == {"2x2", "3x3"}
    assert all(ms >= 0.0 for per in timings.values() for ms in per.values())


def test_benchmark_unknown_method():
    with pytest.raises(ValueError):
        benchmark_solvers([(2, 2)], methods=("greedy",))


def test_markdown_report(tmp_path):
    timings = {"exhaustive": {"2x2": 0.5}, "dynamic": {"2x2": 0.1, "10x10": 2.0}}
    p = write_markdown_report(tmp_path, "Run", {"match_rate": 1.0}, notes="ok", timings_ms=timings)
    text = p.read_text(encoding="utf-8")
    assert text.startswith("# Run")
    assert "- **match_rate**: 1.0000" in text
    assert "| 10x10 | - | 2.0000 |" in text
    assert (tmp_path / "figures").is_dir()


def test_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = build_logger("cranes-test-file", "DEBUG", log_file)
    logger.debug("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    assert build_logger("cranes-test-file") is logger
    assert len(logger.handlers) == 2
    assert logger.level == logging.INFO
