"""End-to-end tests for the command-line runner."""

import json

import pandas as pd
import pytest
import yaml

from cluster_similarity.run import main, run_scoring


@pytest.fixture
def workspace(tmp_path):
    labels_path = tmp_path / "labels.csv"
    pd.DataFrame({
        "k3_seed1": [0, 0, 1, 1, 2, 2],
        "k3_seed2": [2, 2, 0, 0, 1, 1],
        "k2_seed1": [0, 0, 0, 1, 1, 1],
    }).to_csv(labels_path, index=False)

    config = {
        "global": {"log_level": "DEBUG", "output_dir": str(tmp_path / "artifacts")},
        "data": {"labels": {"path": str(labels_path), "delimiter": ",", "columns": []}},
        "scoring": {"backend": "pairwise", "n_jobs": 1},
    }
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump(config))
    return tmp_path, config_path


class TestRunScoring:

    def test_writes_outputs(self, workspace):
        tmp_path, config_path = workspace
        result = run_scoring(str(config_path))

        assert result["output_dir"] == str(tmp_path / "artifacts")
        out_dir = tmp_path / "artifacts"
        matrix = pd.read_csv(out_dir / "similarity_matrix.csv", index_col=0)
        assert matrix.loc["k3_seed1", "k3_seed2"] == pytest.approx(1.0)
        assert matrix.loc["k2_seed1", "k2_seed1"] == pytest.approx(1.0)

        with open(out_dir / "run_metadata.json") as f:
            metadata = json.load(f)
        assert metadata["n_items"] == 6
        assert metadata["backend"] == "pairwise"
        assert metadata["columns"] == ["k3_seed1", "k3_seed2", "k2_seed1"]

        with open(out_dir / "scoring_config.json") as f:
            assert json.load(f) == {"backend": "pairwise", "n_jobs": 1}

    def test_overrides(self, workspace):
        tmp_path, config_path = workspace
        out_dir = tmp_path / "override"
        result = run_scoring(str(config_path), backend="contingency", output_dir=str(out_dir))

        assert result["metadata"]["backend"] == "contingency"
        assert (out_dir / "similarity_matrix.csv").exists()

    def test_invalid_override_rejected(self, workspace):
        _, config_path = workspace
        with pytest.raises(ValueError):
            run_scoring(str(config_path), n_jobs=0)


class TestMain:

    def test_success_exit_code(self, workspace):
        tmp_path, config_path = workspace
        assert main(["--config", str(config_path), "--output-dir", str(tmp_path / "cli")]) == 0
        assert (tmp_path / "cli" / "similarity_matrix.csv").exists()

    def test_missing_config_exit_code(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1

    def test_missing_labels_still_scored(self, workspace, tmp_path):
        _, config_path = workspace
        bad_labels = tmp_path / "bad.csv"
        bad_labels.write_text("a,b\n0,0\n0,\n")
        # Short rows load as NaN, so every column keeps the same length
        assert main(["--config", str(config_path), "--labels", str(bad_labels),
                     "--output-dir", str(tmp_path / "bad")]) == 0

    def test_contingency_backend_with_missing_labels(self, workspace, tmp_path):
        _, config_path = workspace
        labels = tmp_path / "gaps.csv"
        labels.write_text("a,b\n0,0\n0,\n1,1\n")
        out_dir = tmp_path / "gaps"
        assert main(["--config", str(config_path), "--labels", str(labels),
                     "--backend", "contingency", "--output-dir", str(out_dir)]) == 0

        matrix = pd.read_csv(out_dir / "similarity_matrix.csv", index_col=0)
        assert matrix.loc["a", "a"] == pytest.approx(1.0)
        # the gap is its own cluster, so b has no repeated label
        assert matrix.loc["b", "b"] == pytest.approx(0.0)
        assert matrix.loc["a", "b"] == pytest.approx(0.0)
