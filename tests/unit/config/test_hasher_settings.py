"""Unit tests for HasherSettings and the settings loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from credhash.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    HasherSettings,
)
from credhash.config.validation import ConfigError, InvalidSettingValueError
from credhash.security.passwords.params import HashingPolicy

_ENV_KEYS = (
    "CREDHASH_ALGORITHM",
    "CREDHASH_PBKDF2_ITERATIONS",
    "CREDHASH_BCRYPT_WORK_FACTOR",
    "CREDHASH_SCRYPT_N",
    "CREDHASH_SALT_LENGTH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values written by load_dotenv.
    for key in _ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# HasherSettings validation
# ---------------------------------------------------------------------------


class TestHasherSettings:
    def test_defaults(self) -> None:
        settings = HasherSettings()
        assert settings.algorithm == "pbkdf2"
        assert settings.pbkdf2_iterations == 600_000
        assert settings.bcrypt_work_factor == 12
        assert (settings.scrypt_n, settings.scrypt_r, settings.scrypt_p) == (2**15, 8, 1)
        assert settings.salt_length == 16

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HasherSettings(algorithm="md5")
        assert exc_info.value.setting_name == "algorithm"

    def test_short_salt(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HasherSettings(salt_length=8)

    def test_weak_pbkdf2_default(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HasherSettings(pbkdf2_iterations=1_000)
        assert exc_info.value.setting_name == "pbkdf2_iterations"

    def test_bcrypt_work_factor_out_of_range(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HasherSettings(bcrypt_work_factor=40)
        assert exc_info.value.setting_name == "bcrypt_work_factor"

    def test_scrypt_over_memory_ceiling(self) -> None:
        with pytest.raises(ConfigError):
            HasherSettings(scrypt_n=2**20)

    def test_raised_ceiling_allows_bigger_scrypt(self) -> None:
        settings = HasherSettings(scrypt_n=2**20, max_scrypt_memory_bytes=2**31)
        assert HashingPolicy.from_settings(settings).max_scrypt_memory_bytes == 2**31

    @pytest.mark.parametrize("floor", [0, -5])
    def test_pbkdf2_floor_must_be_at_least_one(self, floor: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HasherSettings(min_pbkdf2_iterations=floor)
        assert exc_info.value.setting_name == "min_pbkdf2_iterations"

    def test_lowest_pbkdf2_floor(self) -> None:
        assert HasherSettings(min_pbkdf2_iterations=1).min_pbkdf2_iterations == 1

    @pytest.mark.parametrize("ceiling", [0, -1])
    def test_scrypt_ceiling_must_be_positive(self, ceiling: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HasherSettings(max_scrypt_memory_bytes=ceiling)
        assert exc_info.value.setting_name == "max_scrypt_memory_bytes"


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        assert EnvSettingsLoader().load(HasherSettings) == HasherSettings()

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDHASH_ALGORITHM", "bcrypt")
        monkeypatch.setenv("CREDHASH_BCRYPT_WORK_FACTOR", "13")
        settings = EnvSettingsLoader().load(HasherSettings)
        assert settings.algorithm == "bcrypt"
        assert settings.bcrypt_work_factor == 13

    def test_underscored_integers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDHASH_PBKDF2_ITERATIONS", "1_200_000")
        assert EnvSettingsLoader().load(HasherSettings).pbkdf2_iterations == 1_200_000

    def test_non_integer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDHASH_SCRYPT_N", "lots")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(HasherSettings)
        assert exc_info.value.setting_name == "CREDHASH_SCRYPT_N"

    def test_invalid_value_surfaces_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDHASH_ALGORITHM", "sha1")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(HasherSettings)


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CREDHASH_ALGORITHM=scrypt\nCREDHASH_SCRYPT_N=16384\n")
        settings = DotenvSettingsLoader(str(env_file)).load(HasherSettings)
        assert settings.algorithm == "scrypt"
        assert settings.scrypt_n == 16384

    def test_existing_env_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CREDHASH_ALGORITHM", "bcrypt")
        env_file = tmp_path / ".env"
        env_file.write_text("CREDHASH_ALGORITHM=scrypt\n")
        settings = DotenvSettingsLoader(str(env_file)).load(HasherSettings)
        assert settings.algorithm == "bcrypt"
