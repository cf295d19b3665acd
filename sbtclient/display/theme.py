"""Theme definitions for rendering server messages."""

from dataclasses import dataclass, field


@dataclass
class Level:
    """Label and Rich style for one severity level."""

    label: str
    style: str


@dataclass
class Theme:
    """Visual theme configuration.

    Log message types and diagnostic severities follow LSP numbering.
    """

    # window/logMessage type -> level
    log_levels: dict[int, Level] = field(default_factory=lambda: {
        1: Level("error", "red"),
        2: Level("warn", "yellow"),
        3: Level("info", ""),
        4: Level("debug", "dim"),
    })
    unknown_log_level: Level = field(default_factory=lambda: Level("log", "dim"))

    # Diagnostic severity -> level
    diagnostic_levels: dict[int, Level] = field(default_factory=lambda: {
        1: Level("error", "red"),
        2: Level("warning", "yellow"),
        3: Level("info", "cyan"),
        4: Level("hint", "dim"),
    })
    unknown_diagnostic_level: Level = field(default_factory=lambda: Level("diagnostic", ""))

    success: str = "green"
    failure: str = "red"
    error: str = "bold red"
    location: str = "bold"

    def log_level(self, type_: int) -> Level:
        return self.log_levels.get(type_, self.unknown_log_level)

    def diagnostic_level(self, severity: int) -> Level:
        return self.diagnostic_levels.get(severity, self.unknown_diagnostic_level)


DEFAULT_THEME = Theme()

# Log message type of the least important server output
DEBUG_LOG_TYPE = 4
