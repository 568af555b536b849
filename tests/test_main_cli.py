import json
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from main import build_parser, main


def _run(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, (json.loads(out) if out.strip() else None)


def test_cli_transform(capsys):
    code, data = _run(capsys, ["transform", "116.404", "39.915", "--from", "wgs84", "--to", "gcj02"])
    assert code == 0
    assert abs(data["longitude"] - 116.4102445) < 1e-6
    assert abs(data["latitude"] - 39.91640428) < 1e-6


def test_cli_batch(capsys):
    code, data = _run(capsys, ["batch", "116.404,39.915", "139.7673068,35.6809591", "--from", "wgs84", "--to", "bd09"])
    assert code == 0
    assert len(data["points"]) == 2
    assert data["points"][1] == {"longitude": 139.7673068, "latitude": 35.6809591}


def test_cli_distance(capsys):
    code, data = _run(capsys, ["distance", "116.404", "39.915", "116.405", "39.916"])
    assert code == 0
    assert abs(data["distance_m"] - 140.14) < 0.1


def test_cli_offset(capsys):
    code, data = _run(capsys, ["offset", "116.404", "39.915", "--distance", "100", "--bearing", "90"])
    assert code == 0
    assert data["longitude"] > 116.404


def test_cli_area_and_contains(capsys):
    square = ["116.404,39.915", "116.405,39.915", "116.405,39.916", "116.404,39.916"]
    code, data = _run(capsys, ["area"] + square)
    assert code == 0
    assert abs(data["area_m2"] - 9483.3) < 1.0

    code, data = _run(capsys, ["contains", "116.4045", "39.9155", "--polygon"] + square)
    assert code == 0
    assert data == {"inside": True}


def test_cli_bbox(capsys):
    code, data = _run(capsys, ["bbox", "116.404,39.915", "116.403,39.914"])
    assert code == 0
    assert data == {"min_lat": 39.914, "max_lat": 39.915, "min_lng": 116.403, "max_lng": 116.404}


def test_cli_invalid_coordinate_exit_code(capsys):
    code, data = _run(capsys, ["transform", "181", "91", "--from", "wgs84", "--to", "gcj02"])
    assert code == 1
    assert data is None


def test_cli_offset_rejects_negative_distance(capsys):
    code, _ = _run(capsys, ["offset", "116.404", "39.915", "--distance", "-5", "--bearing", "0"])
    assert code == 1


def test_parser_rejects_bad_pair():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["bbox", "116.404"])
