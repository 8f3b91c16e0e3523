"""Invocation argument types."""
from __future__ import annotations
from dataclasses import dataclass

VERSION_TOKEN = "<version>"
DARWIN_SHA256_TOKEN = "<darwin_sha256>"
LINUX_SHA256_TOKEN = "<linux_sha256>"

PLACEHOLDERS = (VERSION_TOKEN, DARWIN_SHA256_TOKEN, LINUX_SHA256_TOKEN)


@dataclass(frozen=True)
class FormulaArgs:
    """Values substituted into the tap template, in command-line order."""
    version: str | None
    darwin_sha256: str | None
    linux_sha256: str | None

    def first_missing(self) -> str | None:
        """Return the name of the first absent value, or None if all are set."""
        for name in ("version", "darwin_sha256", "linux_sha256"):
            if not getattr(self, name):
                return name
        return None

    def substitutions(self) -> dict[str, str]:
        return {
            VERSION_TOKEN: self.version or "",
            DARWIN_SHA256_TOKEN: self.darwin_sha256 or "",
            LINUX_SHA256_TOKEN: self.linux_sha256 or "",
        }
