"""Analytics configuration: policy profiles plus file-based overrides."""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from org_analytics.exceptions import ConfigurationError
from org_analytics.utils.io import load_toml_config
from org_analytics.utils.types import OutputFormat

logger = logging.getLogger(__name__)

type ConfigDict = dict[str, str | int | bool]

PROJECT_ROOT = Path(__file__).parent.parent
YAML_CONFIG = "org_analytics.yaml"
DEFAULT_INPUT_FILE = "SampleData.csv"


@dataclass(frozen=True)
class PolicyConfig:
    minimum_percentage: int
    maximum_percentage: int
    reporting_lines_threshold: int


@dataclass(frozen=True)
class InputConfig:
    path: Path
    has_header: bool


@dataclass(frozen=True)
class OutputConfig:
    directory: Path | None
    fmt: OutputFormat


@dataclass(frozen=True)
class AnalyticsConfig:
    policy: PolicyConfig
    input: InputConfig
    output: OutputConfig
    profile: str


def _profile_policy(profile: str) -> PolicyConfig:
    match profile:
        case "default":
            return PolicyConfig(minimum_percentage=20, maximum_percentage=50, reporting_lines_threshold=4)
        case "strict":
            return PolicyConfig(minimum_percentage=25, maximum_percentage=40, reporting_lines_threshold=3)
        case "lenient":
            return PolicyConfig(minimum_percentage=10, maximum_percentage=75, reporting_lines_threshold=6)
        case other:
            raise ConfigurationError(f"Unknown policy profile: {other}")


def _require_int(key: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f"Config value '{key}' must be an integer", details={"value": repr(value)})
    return value


def read_config_file(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read overrides from ``org_analytics.yaml`` or, failing that, pyproject.toml."""
    yaml_path = root / YAML_CONFIG
    if yaml_path.exists():
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{YAML_CONFIG} must contain a mapping", details={"found": type(data).__name__}
            )
        logger.debug("Loaded config overrides from %s", yaml_path)
        return data

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    return load_toml_config(pyproject).get("tool", {}).get("org_analytics", {})


def apply_overrides(config: AnalyticsConfig, overrides: ConfigDict) -> AnalyticsConfig:
    """Return ``config`` with every recognised key in ``overrides`` applied."""
    policy, input_cfg, output = config.policy, config.input, config.output

    for key, value in overrides.items():
        match key:
            case "minimum_percentage" | "maximum_percentage" | "reporting_lines_threshold":
                policy = replace(policy, **{key: _require_int(key, value)})
            case "file":
                input_cfg = replace(input_cfg, path=Path(value))
            case "has_header":
                input_cfg = replace(input_cfg, has_header=bool(value))
            case "export_dir":
                output = replace(output, directory=Path(value) if value else None)
            case "format":
                try:
                    output = replace(output, fmt=OutputFormat(value))
                except ValueError as exc:
                    raise ConfigurationError(f"Unsupported output format: {value}") from exc
            case "profile":
                continue
            case unknown:
                logger.warning("Ignoring unknown config key: %s", unknown)

    return replace(config, policy=policy, input=input_cfg, output=output)


def load_analytics_config(profile: str | None = None, root: Path = PROJECT_ROOT) -> AnalyticsConfig:
    """Build the effective configuration for a run.

    The profile comes from the argument, else the config file, else
    ``default``; file values then override the profile's policy.
    """
    overrides = read_config_file(root)
    profile = profile or overrides.get("profile", "default")

    config = AnalyticsConfig(
        policy=_profile_policy(profile),
        input=InputConfig(path=Path(DEFAULT_INPUT_FILE), has_header=True),
        output=OutputConfig(directory=None, fmt=OutputFormat.CSV),
        profile=profile,
    )
    return apply_overrides(config, overrides)
