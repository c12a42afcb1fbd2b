import json

import jsonschema
import pandas as pd
import pytest

from distillforge import InvalidParameterError, Scenario, generate_series_excel, validate_scenario
from distillforge.simulate import main

SCENARIO = {
    "name": "bench still",
    "models": {
        "water_pressure": {"type": "antoine", "substance": "water", "min_t": 0, "max_t": 120},
        "column": {"type": "mccabe_thiele", "alpha": 2.5, "reflux_ratio": 2.0, "xd": 0.95},
        "warmup": {"type": "heating", "t0": 20, "t_max": 100, "k": 0.1},
        "purity": {"type": "conductivity", "initial": 50, "final": 1, "k": 0.2, "duration": 30},
        "production": {"type": "flow", "power": 1000, "efficiency": 0.9},
        "bill": {"type": "power", "power": 1000, "cost_per_kwh": 0.25},
        "batch": {"type": "rayleigh", "alpha": 3.0, "initial_f": 100, "initial_xf": 0.5},
    },
}


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "bench.json"
    path.write_text(json.dumps(SCENARIO), encoding="utf-8")
    return path


class TestValidation:
    def test_valid_file(self, scenario_file):
        assert validate_scenario(str(scenario_file)) == SCENARIO

    def test_valid_dict(self):
        assert validate_scenario(SCENARIO) is SCENARIO

    @pytest.mark.parametrize(
        "model",
        [
            {"type": "kettle"},
            {"type": "heating", "t0": 20, "t_max": 100},
            {"type": "heating", "t0": 20, "t_max": 100, "k": 0},
            {"type": "heating", "t0": 20, "t_max": 100, "k": 0.1, "duration": 2.5},
            {"type": "rayleigh", "alpha": 1.0, "initial_f": 100, "initial_xf": 0.5},
            {"type": "flow", "power": 1000, "efficiency": 0.9, "voltage": 230},
        ],
    )
    def test_invalid_models(self, model):
        with pytest.raises(jsonschema.ValidationError):
            validate_scenario({"models": {"m": model}})

    def test_requires_models(self):
        with pytest.raises(jsonschema.ValidationError):
            validate_scenario({"name": "empty", "models": {}})

    @pytest.mark.parametrize("run_name", ["a" * 32, "has space", "../escape", ""])
    def test_rejects_unsafe_run_names(self, run_name):
        model = {"type": "power", "power": 1000, "cost_per_kwh": 0.2}
        with pytest.raises(jsonschema.ValidationError):
            validate_scenario({"models": {run_name: model}})

    def test_accepts_31_character_run_name(self):
        model = {"type": "power", "power": 1000, "cost_per_kwh": 0.2}
        validate_scenario({"models": {"a" * 31: model}})


class TestScenario:
    def test_runs_every_model(self):
        results = Scenario(SCENARIO).run()
        assert list(results) == list(SCENARIO["models"])
        assert len(results["water_pressure"]) == 51
        assert len(results["column"]) == 51
        assert len(results["warmup"]) == 61
        assert len(results["purity"]) == 31
        assert results["batch"][0]["distillateComposition"] == pytest.approx(0.75)

    def test_unrounded_option(self):
        config = {"rounded": False, "models": {"w": SCENARIO["models"]["warmup"]}}
        series = Scenario(config).run()["w"]
        assert series[-1]["temperature"] != round(series[-1]["temperature"], 2)

    def test_unknown_model_type(self):
        with pytest.raises(InvalidParameterError, match="Unknown model type"):
            Scenario({"models": {"m": {"type": "kettle"}}}).build_runs()

    def test_metrics_per_run(self):
        scenario = Scenario(SCENARIO)
        scenario.run()
        metrics = scenario.metrics
        assert list(metrics) == list(SCENARIO["models"])
        assert metrics["water_pressure"]["boilingPoint"] == pytest.approx(100.0, abs=0.1)
        assert metrics["column"]["minRefluxEstimate"] == pytest.approx(1 / 1.5)
        assert metrics["warmup"]["timeConstant"] == pytest.approx(10.0)
        assert metrics["purity"]["reduction"] == pytest.approx(98.0)
        assert metrics["production"]["totalVolume"] == scenario.results["production"][-1]["totalVolume"]
        assert metrics["bill"]["totalEnergy"] == 1.0
        assert metrics["bill"]["totalCost"] == 0.25
        assert 0 < metrics["batch"]["yield"] <= 100

    def test_unknown_substance(self):
        config = {"models": {"m": {"type": "antoine", "substance": "lead", "min_t": 0, "max_t": 10}}}
        with pytest.raises(InvalidParameterError):
            Scenario(config).run()


class TestCli:
    def test_run_exports_series(self, scenario_file, tmp_path):
        out = tmp_path / "out"
        main(["run", str(scenario_file), "--output-dir", str(out)])

        with open(out / "bench_series.json", encoding="utf-8") as f:
            series = json.load(f)
        assert list(series) == list(SCENARIO["models"])
        for name in SCENARIO["models"]:
            assert (out / f"bench_{name}.csv").exists()
            assert (out / f"bench_{name}.png").exists()

        column = pd.read_csv(out / "bench_column.csv")
        assert list(column.columns) == ["x", "yEq", "yOp", "xLine"]
        sheets = pd.read_excel(out / "bench_series.xlsx", sheet_name=None)
        assert set(sheets) == set(SCENARIO["models"])
        assert len(sheets["batch"]) == 48

        with open(out / "bench_metrics.json", encoding="utf-8") as f:
            metrics = json.load(f)
        assert metrics["warmup"]["timeConstant"] == pytest.approx(10.0)

    def test_run_without_plots(self, scenario_file, tmp_path):
        out = tmp_path / "out"
        main(["run", str(scenario_file), "-o", str(out), "--no-plots"])
        assert not list(out.glob("*.png"))

    def test_validate_command(self, scenario_file):
        main(["validate", str(scenario_file)])

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["validate", str(tmp_path / "nope.json")])
        assert exc.value.code == 1

    def test_invalid_file_exits(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"models": {"m": {"type": "kettle"}}}), encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["run", str(path), "-o", str(tmp_path)])

    def test_model_error_exits(self, tmp_path):
        path = tmp_path / "lead.json"
        config = {"models": {"m": {"type": "antoine", "substance": "lead", "min_t": 0, "max_t": 10}}}
        path.write_text(json.dumps(config), encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["run", str(path), "-o", str(tmp_path)])

    def test_substances_command(self, capsys):
        main(["substances"])
        out = capsys.readouterr().out
        assert "Water" in out and "Tb=100.0 C" in out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


def test_bundled_example_scenario(tmp_path):
    from pathlib import Path

    example = Path(__file__).resolve().parent.parent / "scenarios" / "water_still.json"
    config = validate_scenario(str(example))
    results = Scenario(config).run()
    assert set(results) == set(config["models"])


class TestExcelExport:
    def test_sheet_name_collision_raises(self, tmp_path):
        results = {
            "a" * 31 + "_heat": [{"time": 0, "w": 0}, {"time": 1, "w": 1}],
            "a" * 31 + "_cond": [{"time": 0, "w": 2}, {"time": 1, "w": 3}],
        }
        with pytest.raises(InvalidParameterError, match="same sheet"):
            generate_series_excel(results, "clash.xlsx", str(tmp_path))

    def test_case_only_difference_raises(self, tmp_path):
        results = {"Heat": [{"time": 0}], "heat": [{"time": 0}]}
        with pytest.raises(InvalidParameterError):
            generate_series_excel(results, "clash.xlsx", str(tmp_path))

    def test_one_sheet_per_run(self, tmp_path):
        results = {"first": [{"time": 0, "w": 1}], "second": [{"time": 0, "w": 2}]}
        path = generate_series_excel(results, "ok.xlsx", str(tmp_path))
        sheets = pd.read_excel(path, sheet_name=None)
        assert set(sheets) == {"first", "second"}
        assert sheets["second"]["w"].tolist() == [2]
