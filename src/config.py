# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the word hunt.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

import yaml

from models import normalize_word
from session import DEFAULT_GRID_SIZE, DEFAULT_WORDS


# Valid configuration values
MIN_SIZE = 2
MAX_SIZE = 26
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class TimingConfig:
    """Configuration for the post-win sequence."""
    win_delay_seconds: float = 0.5
    countdown_ticks: int = 5
    tick_interval_seconds: float = 1.0


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    svg_file: Optional[str] = None
    log_level: str = "INFO"
    log_file_prefix: str = "word_hunt"
    enable_console_logging: bool = False


@dataclass
class PuzzleConfig:
    """Complete configuration for a word hunt game."""
    # Puzzle settings
    size: int = DEFAULT_GRID_SIZE
    words: List[str] = field(default_factory=lambda: list(DEFAULT_WORDS))
    retry_budget: int = 100
    seed: Optional[int] = None

    # Sub-configurations
    timing: TimingConfig = field(default_factory=TimingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.timing, dict):
            self.timing = TimingConfig(**self.timing)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    @classmethod
    def from_yaml(cls, path: str) -> 'PuzzleConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            PuzzleConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'PuzzleConfig':
        """Create PuzzleConfig from dictionary."""
        # Handle nested 'puzzle' key
        puzzle_data = data.get('puzzle', {}) or {}
        defaults = cls()

        words = puzzle_data.get('words', defaults.words)
        if not isinstance(words, list):
            raise ConfigValidationError(
                f"puzzle.words must be a list, got {type(words).__name__}"
            )

        config = cls(
            size=puzzle_data.get('size', defaults.size),
            words=[str(w) for w in words],
            retry_budget=puzzle_data.get('retry_budget', defaults.retry_budget),
            seed=puzzle_data.get('seed'),
        )

        if 'timing' in data:
            timing_data = data['timing'] or {}
            config.timing = TimingConfig(
                win_delay_seconds=timing_data.get(
                    'win_delay_seconds', config.timing.win_delay_seconds
                ),
                countdown_ticks=timing_data.get(
                    'countdown_ticks', config.timing.countdown_ticks
                ),
                tick_interval_seconds=timing_data.get(
                    'tick_interval_seconds',
                    config.timing.tick_interval_seconds
                ),
            )

        if 'output' in data:
            out_data = data['output'] or {}
            config.output = OutputConfig(
                directory=out_data.get('directory', config.output.directory),
                svg_file=out_data.get('svg_file', config.output.svg_file),
                log_level=out_data.get('log_level', config.output.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', config.output.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging',
                    config.output.enable_console_logging
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'PuzzleConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            PuzzleConfig instance
        """
        config = cls()

        # Map CLI arguments to config
        if hasattr(args, 'size') and args.size:
            config.size = args.size
        if hasattr(args, 'words') and args.words:
            config.words = [w.strip() for w in args.words.split(',')]
        if hasattr(args, 'retry_budget') and args.retry_budget:
            config.retry_budget = args.retry_budget
        if hasattr(args, 'seed') and args.seed is not None:
            config.seed = args.seed
        if hasattr(args, 'output') and args.output:
            config.output.directory = args.output
        if hasattr(args, 'svg') and args.svg:
            config.output.svg_file = args.svg
        if hasattr(args, 'countdown') and args.countdown is not None:
            config.timing.countdown_ticks = args.countdown
        if hasattr(args, 'verbose') and args.verbose:
            config.output.log_level = "DEBUG"
            config.output.enable_console_logging = True

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'PuzzleConfig',
        cli_config: 'PuzzleConfig'
    ) -> 'PuzzleConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged PuzzleConfig instance
        """
        # Start with YAML config as base
        merged = PuzzleConfig(
            size=yaml_config.size,
            words=list(yaml_config.words),
            retry_budget=yaml_config.retry_budget,
            seed=yaml_config.seed,
            timing=yaml_config.timing,
            output=yaml_config.output,
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.size != default.size:
            merged.size = cli_config.size
        if cli_config.words != default.words:
            merged.words = list(cli_config.words)
        if cli_config.retry_budget != default.retry_budget:
            merged.retry_budget = cli_config.retry_budget
        if cli_config.seed is not None:
            merged.seed = cli_config.seed
        if (cli_config.timing.countdown_ticks !=
                default.timing.countdown_ticks):
            merged.timing.countdown_ticks = cli_config.timing.countdown_ticks
        if cli_config.output.directory != default.output.directory:
            merged.output.directory = cli_config.output.directory
        if cli_config.output.svg_file:
            merged.output.svg_file = cli_config.output.svg_file
        if cli_config.output.log_level != default.output.log_level:
            merged.output.log_level = cli_config.output.log_level
        if cli_config.output.enable_console_logging:
            merged.output.enable_console_logging = True

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate size
        if not isinstance(self.size, int) or not MIN_SIZE <= self.size <= MAX_SIZE:
            errors.append(
                f"Invalid size {self.size}. Must be between {MIN_SIZE} and {MAX_SIZE}"
            )

        if not isinstance(self.retry_budget, int) or self.retry_budget < 1:
            errors.append("retry_budget must be a positive integer")

        # Validate words
        if not self.words:
            errors.append("Word list cannot be empty")

        seen = {}
        for word in self.words:
            clean = normalize_word(word)
            if len(clean) < 2:
                errors.append(f"Word '{word}' must have at least 2 letters")
            elif not clean.isalpha():
                errors.append(f"Word '{word}' may only contain letters and spaces")
            elif isinstance(self.size, int) and len(clean) > self.size:
                errors.append(
                    f"Word '{word}' is longer than the grid size {self.size}"
                )
            if clean in seen:
                errors.append(
                    f"Word '{word}' duplicates '{seen[clean]}'"
                )
            else:
                seen[clean] = word

        # Validate timing
        timing_values = [
            ("win_delay_seconds", self.timing.win_delay_seconds, (int, float)),
            ("countdown_ticks", self.timing.countdown_ticks, int),
            ("tick_interval_seconds", self.timing.tick_interval_seconds, (int, float)),
        ]
        for name, value, kinds in timing_values:
            if isinstance(value, bool) or not isinstance(value, kinds):
                errors.append(f"{name} must be a number, got {value!r}")
            elif value < 0:
                errors.append(f"{name} must be non-negative")

        if not isinstance(self.output.log_level, str):
            errors.append(
                f"Invalid log level {self.output.log_level!r}. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )
        elif self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'size': self.size,
                'words': list(self.words),
                'retry_budget': self.retry_budget,
                'seed': self.seed,
            },
            'timing': asdict(self.timing),
            'output': asdict(self.output),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Play a word hunt puzzle in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default puzzle
  word-hunt

  # Custom words and a fixed seed
  word-hunt --words "cat,dog,bird" --size 8 --seed 42

  # Using YAML configuration, CLI arguments override it
  word-hunt --config puzzle.yaml --size 15
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--size", "-s",
        type=int,
        metavar="INT",
        help="Grid size (default: 12)"
    )
    parser.add_argument(
        "--words", "-w",
        metavar="LIST",
        help="Comma-separated words to hide"
    )
    parser.add_argument(
        "--retry-budget",
        type=int,
        metavar="INT",
        help="Placement attempts per word (default: 100)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for a reproducible grid"
    )
    parser.add_argument(
        "--countdown",
        type=int,
        metavar="INT",
        help="Countdown ticks after a win (default: 5)"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory for logs and SVG"
    )
    parser.add_argument(
        "--svg",
        metavar="FILE",
        help="Write the grid as SVG to this file name"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without playing"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> PuzzleConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved PuzzleConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if hasattr(args, 'config') and args.config:
        yaml_config = PuzzleConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = PuzzleConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = PuzzleConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
