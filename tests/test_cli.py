"""Tests for the command line interface."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from featname.cli import app


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "features.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_canonicalize_prints_and_saves_mapping(tmp_path):
    config = _write_config(
        tmp_path,
        """\
        features:
          - type: adm
            params:
              adm_enhn_gain_limit: 1.2
            features: [VMAF_feature_adm2_score]
          - type: motion
            features: [VMAF_feature_motion2_score]
        """,
    )
    output = tmp_path / "out" / "names.json"

    result = CliRunner().invoke(app, ["canonicalize", str(config), "--output", str(output)])

    assert result.exit_code == 0, result.output
    expected = {
        "adm": {"VMAF_feature_adm2_score": "VMAF_feature_adm2_score_egl_1.2"},
        "motion": {"VMAF_feature_motion2_score": "VMAF_feature_motion2_score"},
    }
    assert json.loads(result.output) == expected
    assert json.loads(output.read_text(encoding="utf-8")) == expected


def test_canonicalize_reports_unknown_option(tmp_path):
    config = _write_config(
        tmp_path,
        """\
        features:
          - type: vif
            params:
              gain: 2
        """,
    )
    result = CliRunner().invoke(app, ["canonicalize", str(config)])
    assert result.exit_code != 0
    assert "no option 'gain'" in result.output


def test_canonicalize_reports_unknown_extractor(tmp_path):
    config = _write_config(
        tmp_path,
        """\
        features:
          - type: psnr_hvs
        """,
    )
    result = CliRunner().invoke(app, ["canonicalize", str(config)])
    assert result.exit_code != 0
    assert "Available" in result.output


def test_canonicalize_reports_invalid_config(tmp_path):
    config = _write_config(
        tmp_path,
        """\
        buffer_size: 0
        """,
    )
    result = CliRunner().invoke(app, ["canonicalize", str(config)])
    assert result.exit_code != 0
    assert "Invalid configuration" in result.output


def test_key_command():
    runner = CliRunner()
    assert runner.invoke(app, ["key", "adm2", "adm_enhn_gain_limit", "1.5"]).output.strip() == "adm2_egl_1.5"
    assert runner.invoke(app, ["key", "adm2", "unregistered_key", "1.5"]).output.strip() == "adm2"


def test_extractors_listing():
    result = CliRunner().invoke(app, ["extractors", "--json"])
    assert result.exit_code == 0
    listing = json.loads(result.output)
    assert {"adm", "motion", "vif"} <= set(listing)
    names = [option["name"] for option in listing["adm"]["options"]]
    assert names == ["adm_enhn_gain_limit", "adm_norm_view_dist", "adm_ref_display_height", "debug"]


def test_version():
    from featname import __version__

    result = CliRunner().invoke(app, ["version"])
    assert result.output.strip() == __version__


def test_canonicalize_reports_null_option_default(tmp_path):
    config = _write_config(
        tmp_path,
        """\
        features:
          - extractor:
              name: custom
              options:
                - {name: gain, kind: double, default: null, feature_param: true}
              provided_features: [custom_score]
        """,
    )
    result = CliRunner().invoke(app, ["canonicalize", str(config)])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert not isinstance(result.exception, TypeError)


def test_canonicalize_rejects_non_mapping_document(tmp_path):
    config = _write_config(tmp_path, "- just\n- a list\n")
    result = CliRunner().invoke(app, ["canonicalize", str(config)])
    assert result.exit_code == 1
    assert "Expected a mapping" in result.output
