"""
Declarative configuration

Builds a configuration from a plain mapping, as produced by a parsed
configuration file:

    {
        "name": "app",
        "appenders": [
            {"type": "console", "name": "STDOUT",
             "layout": {"type": "pattern", "pattern": "{level} {message}"}}
        ],
        "loggers": {
            "root": {"level": "error", "appenders": ["STDOUT"]},
            "app.db": {"level": "debug", "additive": false,
                       "appenders": [{"ref": "STDOUT", "level": "warn"}]}
        }
    }

"appenders" may also be a mapping of name to definition.
"""

from typing import Any, List, Mapping, Optional

from log4py.config.builder import AppenderRefSpec, LoggerSpec, apply_logger_specs
from log4py.config.configuration import Configuration
from log4py.config.logger_config import ROOT_LOGGER_NAME
from log4py.config.plugins import create_appender, create_filter
from log4py.core.errors import ConfigurationError
from log4py.core.options import bool_option
from log4py.core.level import Level

ROOT_KEYS = ("root", ROOT_LOGGER_NAME)


def _level(value: Any, where: str) -> Optional[Level]:
    if value is None:
        return None
    try:
        return Level.coerce(value)
    except ValueError as e:
        raise ConfigurationError(f"{where}: {e}") from e


class DictConfiguration(Configuration):
    """Configuration built from a mapping."""

    def __init__(
        self,
        data: Mapping[str, Any],
        name: Optional[str] = None,
        source: str = "programmatic",
    ):
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration data must be a mapping, got {type(data).__name__}"
            )
        super().__init__(name or data.get("name") or source, source=source)
        self._data = data

    def setup(self) -> None:
        appenders = self._data.get("appenders", [])
        if isinstance(appenders, Mapping):
            for name, spec in appenders.items():
                self.add_appender(create_appender(spec, name=name))
        elif isinstance(appenders, list):
            for spec in appenders:
                self.add_appender(create_appender(spec))
        else:
            raise ConfigurationError("'appenders' must be a list or a mapping")

    def configure(self) -> None:
        loggers = self._data.get("loggers", {})
        if not isinstance(loggers, Mapping):
            raise ConfigurationError("'loggers' must be a mapping")

        apply_logger_specs(
            self, [self._logger_spec(name, spec) for name, spec in loggers.items()]
        )

    def _logger_spec(self, name: str, spec: Any) -> LoggerSpec:
        if spec is None:
            spec = {}
        if not isinstance(spec, Mapping):
            raise ConfigurationError(f"Logger '{name}' must be a mapping")

        logger_name = ROOT_LOGGER_NAME if name in ROOT_KEYS else name
        where = f"Logger '{name}'"
        return LoggerSpec(
            logger_name,
            level=_level(spec.get("level"), where),
            additive=bool_option(spec, "additive", True),
            appender_refs=self._appender_refs(spec.get("appenders", []), where),
        )

    def _appender_refs(self, entries: Any, where: str) -> List[AppenderRefSpec]:
        if not isinstance(entries, list):
            raise ConfigurationError(f"{where}: 'appenders' must be a list")

        refs = []
        for entry in entries:
            if isinstance(entry, str):
                refs.append(AppenderRefSpec(entry))
            elif isinstance(entry, Mapping) and entry.get("ref"):
                refs.append(AppenderRefSpec(
                    entry["ref"],
                    level=_level(entry.get("level"), where),
                    filter=create_filter(entry["filter"]) if entry.get("filter") else None,
                ))
            else:
                raise ConfigurationError(f"{where}: invalid appender reference {entry!r}")
        return refs
