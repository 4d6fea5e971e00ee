#!/usr/bin/env python3
"""
Configuration for Palaios

One immutable settings object per run, built from the parsed command
line and handed to the application.
"""

import argparse
import pathlib
from dataclasses import dataclass


@dataclass(frozen=True)
class PalaiosConfig:
    """Settings for a single Palaios run"""

    pattern: str
    number: int = 0
    path: pathlib.Path = pathlib.Path(".")
    dry_run: bool = False
    yes: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PalaiosConfig":
        """Create from parsed command line arguments"""
        return cls(
            pattern=args.pattern,
            number=args.number,
            path=pathlib.Path(args.path),
            dry_run=args.dry_run,
            yes=args.yes,
        )
