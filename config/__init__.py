"""Configuration package for benchmark runs.

Provides a configuration system with support for:
- Multiple configuration sources (defaults, file, environment, CLI)
- Hierarchical configuration with proper precedence
- Immutable configuration objects with validation
"""
from .config import AppConfig, BenchmarkConfig, ConfigLoader, NormalizationConfig, parse_app_args

__all__ = ["AppConfig", "BenchmarkConfig", "NormalizationConfig", "ConfigLoader", "parse_app_args"]
