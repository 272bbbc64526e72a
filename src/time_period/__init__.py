from typing import TYPE_CHECKING, Any

import autosemver

if TYPE_CHECKING:
    # These imports are only for static type checkers (e.g., Pyright, IDEs).
    # At runtime, they are not executed, so the modules won't be imported unless needed.
    from time_period.period import Period, between, from_duration, from_string
    from time_period.utils import days_in_month, days_in_year

try:
    __version__ = autosemver.packaging.get_current_version(project_name="time_period")
except Exception:
    __version__ = "0.0.0"


# Declare the public API of the package. This tells `from time_period import *` what to include.
__all__ = ["Period", "between", "from_duration", "from_string", "days_in_month", "days_in_year"]  # noqa

_PERIOD_NAMES = frozenset(["Period", "between", "from_duration", "from_string"])
_UTILS_NAMES = frozenset(["days_in_month", "days_in_year"])


def __getattr__(name: str) -> Any:
    # NOTE: We use __getattr__ for lazy imports instead of top-level imports because setuptools may evaluate
    #   this module during build (e.g., to use the value of time_period.__version__), before submodules like
    #   `time_period.period` exist. This avoids import-time errors when building from source using pyproject.toml
    #   and keeps compatibility with dynamic versioning tools like autosemver.

    if name in _PERIOD_NAMES:
        from time_period import period  # noqa: PLC0415

        return getattr(period, name)

    if name in _UTILS_NAMES:
        from time_period import utils  # noqa: PLC0415

        return getattr(utils, name)

    raise AttributeError(f"module {__name__} has no attribute {name}")
