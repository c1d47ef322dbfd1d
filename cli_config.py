"""
CLI Configuration Manager for the library catalogue
Manages user preferences and command aliases
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from rich.console import Console

from config import settings

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "preferences": {
        "output_mode": "plain",
    },
    "aliases": {
        "l": "LIST",
        "a": "ADD",
        "r": "REMOVE",
        "s": "SEARCH",
        "g": "GROUP",
        "h": "HELP",
        "q": "EXIT",
    },
}


class CLIConfig:
    """Manages CLI configuration and user preferences."""

    def __init__(self, config_dir: Optional[str] = None):
        self.config_dir = Path(config_dir or settings.config_dir)
        self.config_file = self.config_dir / "config.json"
        self.config: Dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from file, falling back to the in-memory defaults."""
        self.config = json.loads(json.dumps(DEFAULT_CONFIG))
        if not self.config_file.exists():
            return
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not load config from %s: %s", self.config_file, e)
            return
        for section, values in stored.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values
        logger.debug("Config loaded from %s", self.config_file)

    def save_config(self) -> None:
        """Save current configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2, ensure_ascii=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'preferences.output_mode')."""
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation."""
        keys = key.split('.')
        config = self.config

        # Navigate to the parent dictionary
        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self.save_config()

    def _aliases(self) -> Dict[str, str]:
        aliases = self.get("aliases", {})
        if not isinstance(aliases, dict):
            logger.warning("Ignoring aliases in %s: expected a mapping, got %r", self.config_file, aliases)
            return {}
        return dict(aliases)

    def resolve_alias(self, keyword: str) -> str:
        """Get full command keyword from alias."""
        return self._aliases().get(keyword, keyword)

    def add_alias(self, alias: str, command: str) -> None:
        """Add a new command alias."""
        aliases = self._aliases()
        aliases[alias] = command.upper()
        self.set("aliases", aliases)

    def remove_alias(self, alias: str) -> bool:
        """Remove a command alias."""
        aliases = self._aliases()
        if alias not in aliases:
            return False
        del aliases[alias]
        self.set("aliases", aliases)
        return True

    def list_aliases(self) -> Dict[str, str]:
        return self._aliases()

    def reset_to_default(self) -> None:
        """Reset configuration to default values."""
        self.config = json.loads(json.dumps(DEFAULT_CONFIG))
        self.save_config()

    def show_config(self) -> None:
        """Print preferences and aliases as a tree, then the config file location."""
        from rich.tree import Tree

        tree = Tree("Library CLI Configuration", style="bold blue")

        preferences = self.get("preferences", {})
        prefs_branch = tree.add("[bold cyan]Preferences[/]")
        if isinstance(preferences, dict):
            for key, value in preferences.items():
                prefs_branch.add(f"[yellow]{key}[/]: {value}")

        aliases = self._aliases()
        alias_branch = tree.add("[bold cyan]Aliases[/]")
        for name, target in sorted(aliases.items()):
            alias_branch.add(f"[yellow]{name}[/] -> {target}")
        if not aliases:
            alias_branch.add("[dim]none[/]")

        console.print(tree)
        console.print(f"\n[dim]Config file: {self.config_file}[/]")


_cli_config: Optional[CLIConfig] = None

def get_cli_config() -> CLIConfig:
    """Return the process-wide CLIConfig, creating it on first use."""
    global _cli_config
    if _cli_config is None:
        _cli_config = CLIConfig()
    return _cli_config
