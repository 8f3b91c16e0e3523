"""
Tap formula renderer.

Provides:
- Template lookup over an ordered list of candidate paths
- Literal substitution of the version and per-platform sha256 placeholders
- A CLI that prints the rendered Homebrew formula to stdout
"""
