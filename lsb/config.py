"""
Codec and logging configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from .scan import ScanOrder

logger = logging.getLogger(__name__)


class Framing(Enum):
    """How the end of the hidden payload is marked."""
    TERMINATOR = "terminator"  # zero bits past payload end, 8-zero sentinel
    LENGTH = "length"  # 32-bit length header, 8 bits per payload byte


@dataclass
class CodecConfig:
    """
    Codec settings.

    Embed and extract must be given the same framing and scan order.
    """
    framing: Framing = Framing.TERMINATOR
    scan_order: ScanOrder = ScanOrder.ROW_MAJOR
    strict: bool = False

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(errors))

        self.framing = Framing(self.framing)
        self.scan_order = ScanOrder(self.scan_order)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            Framing(self.framing)
        except ValueError:
            errors.append(f"Invalid framing: {self.framing!r}")

        try:
            ScanOrder(self.scan_order)
        except ValueError:
            errors.append(f"Invalid scan order: {self.scan_order!r}")

        return errors

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "framing": self.framing.value,
            "scan_order": self.scan_order.value,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CodecConfig":
        """Build a configuration from a dictionary, filling in defaults."""
        return cls(
            framing=Framing(data.get("framing", Framing.TERMINATOR.value)),
            scan_order=ScanOrder(data.get("scan_order", ScanOrder.ROW_MAJOR.value)),
            strict=bool(data.get("strict", False)),
        )

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "CodecConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        logger.info(f"Configuration loaded from {path}")
        return cls.from_dict(data)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=[logging.StreamHandler()],
        force=True,
    )
