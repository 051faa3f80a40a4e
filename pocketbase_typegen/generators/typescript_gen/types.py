"""Dataclasses for TypeScript generation."""
from dataclasses import dataclass


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Output path, absolute or relative to the working directory
    content: str  # File contents
