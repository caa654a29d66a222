"""Pytest configuration for tana_validation test suite.

Hypothesis profiles:
- dev: 500 examples (default)
- ci: 50 examples, derandomized; selected when CI=true
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE=<name> overrides the selection.
"""

import os

from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick HYPOTHESIS_PROFILE if valid, else "ci" under CI=true, else "dev"."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())
