"""
Module that contains many useful utilities
for validating data or function arguments
"""
from typing import Any, Dict, Iterable, Mapping, Optional

from mskput.core.dtypes.inference import is_collection, is_dict_like

_ORDINALS = ("First", "Second", "Third", "Fourth")


def _check_for_invalid_keys(fname: str, kwargs: Mapping, compat_args: Iterable[str]):
    """
    Checks whether 'kwargs' contains any keys that are not
    in 'compat_args' and raises a TypeError if there is one.
    """
    # set(dict) --> set of the dictionary's keys
    diff = set(kwargs) - set(compat_args)

    if diff:
        bad_arg = sorted(diff)[0]
        raise TypeError(f"{fname}() got an unexpected keyword argument '{bad_arg}'")


def validate_kwargs(fname: str, kwargs: Mapping, compat_args: Iterable[str]) -> None:
    """
    Checks whether parameters passed to the **kwargs argument in a
    function `fname` are valid parameters as specified in `compat_args`.

    Parameters
    ----------
    fname : str
        The name of the function being passed the `**kwargs` parameter
    kwargs : dict
        The `**kwargs` parameter passed into `fname`
    compat_args: iterable of str
        The keys that `kwargs` is allowed to have

    Raises
    ------
    TypeError if `kwargs` contains keys not in `compat_args`
    """
    _check_for_invalid_keys(fname, kwargs, compat_args)


def validate_collection(value, position: int):
    """
    Ensures that the positional argument at `position` (0-based) is an
    indexable, length-bearing collection.

    Raises
    ------
    TypeError
    """
    if not is_collection(value):
        raise TypeError(
            f"invalid argument. {_ORDINALS[position]} argument must be an "
            f"array-like object. Value: `{value!r}`."
        )
    return value


def validate_one_of(value, arg_name: str, legal_values: Iterable[str]) -> str:
    """
    Ensures that `value` is one of the strings in `legal_values`.

    Unlike the option validators in ``mskput._config``, an illegal argument
    is a TypeError here: the caller passed the wrong kind of thing.
    """
    legal_values = tuple(legal_values)
    if not isinstance(value, str) or value not in legal_values:
        pp_values = ", ".join(f'"{v}"' for v in legal_values)
        raise TypeError(
            f"invalid option. `{arg_name}` option must be one of the following: "
            f"{pp_values}. Option: `{value!r}`."
        )
    return value


def validate_put_options(
    options: Optional[Mapping[str, Any]],
    kwargs: Dict[str, Any],
    legal_modes: Iterable[str],
    default_mode: str,
) -> Dict[str, Any]:
    """
    Validate and resolve the options passed to ``mskput``.

    Parameters
    ----------
    options : mapping or None
        The options argument. Keys other than 'mode' are ignored.
    kwargs : dict
        Keyword arguments; these take precedence over `options`.
    legal_modes : iterable of str
    default_mode : str
        Used when neither `options` nor `kwargs` set a mode.

    Returns
    -------
    dict
        Resolved options, always containing 'mode'.

    Raises
    ------
    TypeError
        If `options` is not a mapping, `kwargs` contains an unknown key, or
        the mode is not one of `legal_modes`.
    """
    if options is not None and not is_dict_like(options):
        raise TypeError(
            f"invalid argument. Options argument must be an object. "
            f"Value: `{options!r}`."
        )
    validate_kwargs("mskput", kwargs, ["mode"])

    opts = {"mode": default_mode}
    for source in (options or {}, kwargs):
        if "mode" in source:
            opts["mode"] = validate_one_of(source["mode"], "mode", legal_modes)
    return opts
