import json
from datetime import datetime

import pytest
from pydantic import ValidationError

from timesamplings import Alignment
from timesamplings.config import Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.source.is_empty()
    assert s.destination.alignment is Alignment.LEFT
    assert s.logging.level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("TIMESAMPLINGS_SOURCE__RATE", "250")
    monkeypatch.setenv("TIMESAMPLINGS_DESTINATION__ALIGNMENT", "Center")
    s = Settings.from_env()
    assert s.source.rate == 250.0
    assert s.destination.alignment is Alignment.CENTER


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(
        json.dumps(
            {
                "source": {"epoch": "2021-02-13T23:34:42", "rate": 1000},
                "destination": {"factor": 20},
                "logging": {"level": "debug"},
            }
        )
    )
    s = load_settings(p)
    assert s.source.epoch == datetime(2021, 2, 13, 23, 34, 42)
    assert s.destination.factor == 20.0
    assert s.logging.level == "DEBUG"


def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("source:\n  rate: 250\n  shift: 15\ndestination:\n  alignment: right\n")
    s = load_settings(p)
    assert s.source.rate == 250.0
    assert s.source.shift == 15.0
    assert s.destination.alignment is Alignment.RIGHT


def test_load_settings_requires_mapping(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_settings(p)


def test_validation():
    with pytest.raises(ValidationError):
        Settings.model_validate({"source": {"rate": 0}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"source": {"factor": 0.5}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"source": {"alignment": "middle"}})
