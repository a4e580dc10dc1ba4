from strutil import PasswordPolicy, Settings


def test_salt_defaults_to_empty(monkeypatch):
    monkeypatch.delenv("PASSWORD_SALT", raising=False)

    settings = Settings()

    assert settings.password_salt == ""
    assert settings.policy == PasswordPolicy()


def test_environment_overrides_init_values(monkeypatch):
    monkeypatch.setenv("PASSWORD_SALT", "from-env")

    assert Settings(password_salt="from-file").password_salt == "from-env"


def test_policy_from_mapping(monkeypatch):
    monkeypatch.delenv("PASSWORD_SALT", raising=False)

    settings = Settings(
        password_salt="pepper",
        policy={"rules": [{"charset": "0123456789", "minCount": 2, "maxCount": 4}]},
    )

    assert settings.password_salt == "pepper"
    assert settings.policy.rules[0].max_count == 4
