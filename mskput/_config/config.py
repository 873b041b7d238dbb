"""
Package-wide configurables.

Options are referenced by dotted, case-insensitive keys (e.g. "put.mode").
They are registered once, at import time, from ``mskput.core.config_init``,
each with a default value, a description and an optional validator. The
registry is process-global and not thread-safe.
"""
from collections import namedtuple
from contextlib import ContextDecorator
import keyword
from typing import Any, Callable, Dict, Iterable, List, Optional

RegisteredOption = namedtuple("RegisteredOption", "key defval doc validator")

# option metadata and current values, both keyed on the lower-cased key
_registered_options: Dict[str, RegisteredOption] = {}
_global_config: Dict[str, Any] = {}


class OptionError(AttributeError, KeyError):
    """
    Exception for mskput options, backwards compatible with KeyError
    checks.
    """


def _get_registered_option(key: str) -> RegisteredOption:
    try:
        return _registered_options[key.lower()]
    except KeyError as err:
        raise OptionError(f"No such option: {repr(key)}") from err


def register_option(
    key: str,
    defval: object,
    doc: str = "",
    validator: Optional[Callable[[Any], Any]] = None,
) -> None:
    """
    Register an option in the package-wide config.

    Parameters
    ----------
    key : str
        Fully-qualified key, e.g. "put.mode".
    defval : object
        Default value of the option.
    doc : str
        Description of the option.
    validator : Callable, optional
        Function of a single argument, should raise `ValueError` if
        called with a value which is not a legal value for the option.

    Raises
    ------
    OptionError
        If `key` is already registered.
    ValueError
        If a path component of `key` is not an identifier, or `validator`
        rejects `defval`.
    """
    key = key.lower()
    if key in _registered_options:
        raise OptionError(f"Option '{key}' has already been registered")

    for part in key.split("."):
        if not part.isidentifier():
            raise ValueError(f"{part} is not a valid identifier")
        if keyword.iskeyword(part):
            raise ValueError(f"{part} is a python keyword")

    # the default value should be legal
    if validator:
        validator(defval)

    _registered_options[key] = RegisteredOption(key, defval, doc, validator)
    _global_config[key] = defval


def get_option(key: str) -> Any:
    """
    Retrieve the value of the option `key`.

    Raises
    ------
    OptionError : if no such option exists

    Examples
    --------
    >>> get_option("put.mode")
    'repeat'
    """
    return _global_config[_get_registered_option(key).key]


def set_option(*args) -> None:
    """
    Set the value of one or more options.

    Invoke as ``set_option(key, value, [key, value, ...])``. Every value is
    validated before any of them is set.

    Raises
    ------
    OptionError : if no such option exists
    ValueError : if a value is not legal for its option
    """
    nargs = len(args)
    if not nargs or nargs % 2 != 0:
        raise ValueError("Must provide an even number of non-keyword arguments")

    pairs = []
    for key, value in zip(args[::2], args[1::2]):
        o = _get_registered_option(key)
        if o.validator:
            o.validator(value)
        pairs.append((o.key, value))

    for key, value in pairs:
        _global_config[key] = value


def reset_option(key: str) -> None:
    """
    Reset an option to its default value. Pass "all" to reset every option.
    """
    if key == "all":
        keys: Iterable[str] = list(_registered_options)
    else:
        keys = [_get_registered_option(key).key]
    for k in keys:
        _global_config[k] = _registered_options[k].defval


def describe_option(key: str) -> str:
    """
    Return a description of the option `key` with its default and current
    values.
    """
    o = _get_registered_option(key)
    doc = o.doc.strip() or "No description available."
    return (
        f"{o.key} {doc}\n"
        f"    [default: {o.defval}] [currently: {_global_config[o.key]}]"
    )


class option_context(ContextDecorator):
    """
    Context manager to temporarily set options in the `with` statement context.

    You need to invoke as ``option_context(key, val, [key, val, ...])``.

    Examples
    --------
    >>> with option_context("put.mode", "strict"):
    ...     get_option("put.mode")
    'strict'
    """

    def __init__(self, *args):
        if len(args) % 2 != 0 or len(args) < 2:
            raise ValueError(
                "Need to invoke as option_context(key, val, [key, val, ...])."
            )

        self.ops = list(zip(args[::2], args[1::2]))

    def __enter__(self):
        self.undo = [(key, get_option(key)) for key, _ in self.ops]
        set_option(*[item for op in self.ops for item in op])

    def __exit__(self, *args):
        if self.undo:
            set_option(*[item for op in self.undo for item in op])


# validator factories for use as the validator arg in register_option


def is_one_of_factory(legal_values: Iterable[Any]) -> Callable[[Any], None]:
    """
    Return a validator raising ValueError unless its argument is one of
    `legal_values`.
    """
    legal: List[Any] = list(legal_values)

    def inner(x) -> None:
        if not any(x is v or (type(x) is type(v) and x == v) for v in legal):
            pp_values = "|".join(str(v) for v in legal)
            raise ValueError(f"Value must be one of {pp_values}")

    return inner
