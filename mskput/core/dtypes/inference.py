""" basic inference routines """

from collections import abc


def is_dict_like(obj) -> bool:
    """
    Check if the object is dict-like.

    Parameters
    ----------
    obj : The object to check

    Returns
    -------
    is_dict_like : bool
        Whether `obj` has dict-like properties.

    Examples
    --------
    >>> is_dict_like({1: 2})
    True
    >>> is_dict_like([1, 2, 3])
    False
    >>> is_dict_like(dict)
    False
    >>> is_dict_like(dict())
    True
    """
    dict_like_attrs = ("__getitem__", "keys", "__contains__")
    return (
        all(hasattr(obj, attr) for attr in dict_like_attrs)
        # [GH 25196] exclude classes
        and not isinstance(obj, type)
    )


def is_collection(obj) -> bool:
    """
    Check if the object is an indexable, length-bearing collection.

    Lists, tuples, one-dimensional NumPy arrays, ``array.array`` and any
    object implementing ``__len__`` and positional ``__getitem__`` qualify.
    Strings, bytes, mappings, sets, scalars, ``None``, functions and classes
    do not.

    Parameters
    ----------
    obj : The object to check

    Returns
    -------
    is_collection : bool

    Examples
    --------
    >>> is_collection([1, 2, 3])
    True
    >>> is_collection(np.zeros(3))
    True
    >>> is_collection("abc")
    False
    >>> is_collection({})
    False
    >>> is_collection(np.float64(1.0))
    False
    """
    if isinstance(obj, (str, bytes, bytearray, type)):
        return False
    if is_dict_like(obj) or isinstance(obj, abc.Set):
        return False
    if not (hasattr(obj, "__len__") and hasattr(obj, "__getitem__")):
        return False
    try:
        # 0-dim arrays define __len__ but raise when it is called
        len(obj)
    except TypeError:
        return False
    return True


def is_mutable_collection(obj) -> bool:
    """
    Check if the object is a collection supporting item assignment.

    Examples
    --------
    >>> is_mutable_collection([1, 2])
    True
    >>> is_mutable_collection((1, 2))
    False
    """
    return is_collection(obj) and hasattr(obj, "__setitem__")
