import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_PATH = Path.home() / ".config" / "archdate" / "config.toml"

DEFAULT_DATE_FIELDS: tuple[str, ...] = ("date", "urldate", "origdate", "eventdate")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    date_fields: list[str] = field(default_factory=lambda: list(DEFAULT_DATE_FIELDS))
    preserve_width: bool = False
    log_level: str = "WARNING"


def is_first_run() -> bool:
    """Return True if no config file exists yet."""
    return not CONFIG_PATH.exists()


def default_config() -> Config:
    return Config()


def load_config() -> Config:
    if not CONFIG_PATH.exists():
        return default_config()
    with open(CONFIG_PATH, "rb") as f:
        data = tomllib.load(f)
    bib = data.get("bib", {})
    fmt = data.get("format", {})
    log = data.get("log", {})

    level = str(log.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level in {CONFIG_PATH}: {level}")

    return Config(
        date_fields=[str(f) for f in bib.get("date_fields", DEFAULT_DATE_FIELDS)],
        preserve_width=bool(fmt.get("preserve_width", False)),
        log_level=level,
    )


def _toml_escape(value: str) -> str:
    """Escape a string value for embedding in a TOML double-quoted string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def save_config(config: Config) -> None:
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    fields = ", ".join(f'"{_toml_escape(f)}"' for f in config.date_fields)
    lines = [
        "[bib]",
        f"date_fields = [{fields}]",
        "",
        "[format]",
        f'preserve_width = {"true" if config.preserve_width else "false"}',
        "",
        "[log]",
        f'level = "{_toml_escape(config.log_level)}"',
        "",
    ]
    CONFIG_PATH.write_text("\n".join(lines), encoding="utf-8")
