"""Config validation errors – phrased in terms of the environment variables to set."""
from __future__ import annotations

from grant_tracker.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The exporter cannot be built from the current configuration."""
    default_code = "config_error"
    category = "configuration"


class MissingRequiredSettingError(ConfigError):
    """None of the environment variables that can satisfy a setting is set.

    ``env_vars`` lists the alternatives, e.g. a dataset URL *or* a bundled path.
    """
    default_code = "missing_required_setting"

    def __init__(self, *env_vars: str) -> None:
        if not env_vars:
            raise ValueError("at least one environment variable name is required")
        super().__init__(
            f"Set {' or '.join(env_vars)}",
            detail={"env_vars": list(env_vars)},
        )
        self.env_vars = env_vars


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable.

    ``setting_name`` is the settings field; ``env_var`` the variable it was
    (or would be) read from, when known.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_var: str | None = None,
    ) -> None:
        shown = env_var or setting_name
        super().__init__(
            f"{shown}={value!r} is invalid: {reason}",
            detail={"setting": setting_name, "env_var": env_var, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_var = env_var
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
