import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'outcomes': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _ansi:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """raised by the assert helpers, kept apart from unexpected errors in the report."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator registering a function as a case. the function stays callable (and pytest-collectable)."""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator

# the decorator itself is not a test
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CheckFailed(message)


def assert_equal(actual: Any, expected: Any, message: Optional[str] = None) -> None:
    """equality check that reports both sides"""
    if not actual == expected:
        raise CheckFailed(f"{message + ': ' if message else ''}expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any], message: Optional[str] = None) -> BaseException:
    """run func and insist it raises error_type. returns the caught error for further checks"""
    try:
        func()
    except error_type as e:
        return e
    raise CheckFailed(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run", exit_on_failure: bool = True) -> int:
    """executes all registered cases, prints a report, returns the number of failures."""
    print(f"\n{_ansi.info}--- {title} ---{_ansi.reset}")
    started = time.perf_counter()
    outcomes = _registry['outcomes'] = []

    for case in _registry['cases']:
        error = None
        try:
            case['func']()
        except CheckFailed as e:
            error = f"check failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        outcomes.append({'passed': error is None, 'description': case['description'], 'error': error})
        if error is None:
            print(f"  {_ansi.ok}✔ pass{_ansi.reset}  {PASS_MARK}  {case['description']}")
        else:
            print(f"  {_ansi.fail}✖ fail{_ansi.reset}  {FAIL_MARK}  {case['description']}")
            print(f"    {_ansi.grey}└─> {error}{_ansi.reset}")

    failed = _summarize(started)
    # allow several separate runs from one script
    _registry['cases'] = []
    if failed and exit_on_failure:
        sys.exit(1)
    return failed


def _summarize(started: float) -> int:
    elapsed = (time.perf_counter() - started) * 1000
    outcomes = _registry['outcomes']
    passed = sum(1 for outcome in outcomes if outcome['passed'])
    failed = len(outcomes) - passed
    color = _ansi.ok if failed == 0 else _ansi.fail

    print(f"\n{color}--- summary ---{_ansi.reset}")
    print(f"  ran {_ansi.info}{len(outcomes)}{_ansi.reset} cases in {_ansi.warn}{elapsed:.2f}ms{_ansi.reset}")
    print(f"  {_ansi.ok}passed: {passed}{_ansi.reset}, {_ansi.fail}failed: {failed}{_ansi.reset}")
    print(f"{color}---------------{_ansi.reset}\n")
    return failed
