import pytest
from pydantic import ValidationError

from patternhive.config import DemoConfig


def test_defaults():
    config = DemoConfig()
    assert config.log_level == "WARNING"
    assert config.loan_days == 14
    assert config.random_seed is None


def test_log_level_is_normalised():
    assert DemoConfig(log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError) as exc:
        DemoConfig(log_level="chatty")
    assert "log_level" in str(exc.value)


def test_loan_days_must_be_positive():
    with pytest.raises(ValidationError):
        DemoConfig(loan_days=0)


def test_from_env():
    config = DemoConfig.from_env(
        {
            "PATTERNHIVE_LOG_LEVEL": "info",
            "PATTERNHIVE_LOAN_DAYS": "21",
            "PATTERNHIVE_RANDOM_SEED": "",
            "UNRELATED": "1",
        }
    )
    assert config.log_level == "INFO"
    assert config.loan_days == 21
    assert config.random_seed is None


def test_from_env_invalid_value():
    with pytest.raises(ValidationError):
        DemoConfig.from_env({"PATTERNHIVE_LOAN_DAYS": "soon"})
