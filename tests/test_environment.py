import pytest

from core.config import REQUIRED_KEYS, env_name
from core.services.environment import check_environment, inspect_settings, pat_warnings
from fakes import ScriptedConsole

GOOD_PAT = "a" * 52


def _all_set(make_settings, **overrides):
    values = {
        "org_url": "https://dev.azure.com/contoso",
        "auth_method": "pat",
        "pat": GOOD_PAT,
        "default_project": "Contoso",
    }
    values.update(overrides)
    return make_settings(**values)


def test_all_keys_present_returns_true(make_settings):
    port = ScriptedConsole()

    assert check_environment(settings=_all_set(make_settings), port=port) is True
    for key in REQUIRED_KEYS:
        assert f"{env_name(key)}: Set" in port.text
    assert "Not set" not in port.text


@pytest.mark.parametrize("missing", REQUIRED_KEYS)
def test_missing_key_is_reported_and_returns_false(make_settings, missing):
    port = ScriptedConsole()
    settings = _all_set(make_settings, **{missing: None})

    assert check_environment(settings=settings, port=port) is False
    assert f"{env_name(missing)}: Not set" in port.text


def test_empty_string_counts_as_not_set(make_settings):
    checks = {c.field_name: c for c in inspect_settings(_all_set(make_settings, default_project=""))}

    assert checks["default_project"].present is False
    assert checks["pat"].present is True


def test_org_url_and_auth_method_are_echoed_but_pat_is_not(make_settings):
    port = ScriptedConsole()
    check_environment(settings=_all_set(make_settings), port=port)

    assert "Value: https://dev.azure.com/contoso" in port.text
    assert "Value: pat" in port.text
    assert GOOD_PAT not in port.text
    assert "AZURE_DEVOPS_PAT: Set (length: 52 characters)" in port.text


def test_pat_with_colon_gets_format_warning(make_settings):
    port = ScriptedConsole()
    check_environment(settings=_all_set(make_settings, pat="user:" + GOOD_PAT), port=port)

    assert "PAT contains colon character" in port.text


def test_short_pat_gets_length_warning():
    assert any("too short (12 chars)" in w for w in pat_warnings("abcdefghijkl"))


def test_pat_with_space_gets_space_warning():
    assert any("contains spaces" in w for w in pat_warnings(GOOD_PAT + " x"))


def test_well_formed_pat_has_no_warnings():
    assert pat_warnings(GOOD_PAT) == []


def test_found_env_files_are_reported(make_settings, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("AZURE_DEVOPS_PAT=x\n", encoding="utf-8")
    port = ScriptedConsole()

    check_environment(
        settings=make_settings(),
        port=port,
        env_files=[env_file, tmp_path / "missing.env"],
    )

    assert f"Found and loaded {env_file}" in port.text
    assert "missing.env" not in port.text
