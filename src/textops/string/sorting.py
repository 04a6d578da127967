"""
Case-insensitive sorting of strings by repeated binary-search insertion.
"""


def _key(string):
    # Case-insensitive order. Strings that differ only in case are ordered by
    # their raw value so that the final order does not depend on input order
    return (string.lower(), string)


def _check(item):
    if item is None:
        raise TypeError('Cannot insert None into a sorted sequence of strings.')
    return item


def insertion_index(items, item):
    """
    Find the index at which `item` can be inserted into the sorted list of
    strings `items` while keeping it sorted case-insensitively. The list is not
    modified.

    Parameters
    ----------
    items : list of str or None
        Sorted strings. None is treated as an empty list.
    item : str
        The string to be placed.

    Examples
    --------
    >>> insertion_index(['apple', 'Cherry'], 'banana')
    1

    Returns
    -------
    int
    """
    key = _key(_check(item))
    if not items:
        return 0

    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        mid_key = _key(items[mid])
        if mid_key < key:
            low = mid + 1
        elif mid_key > key:
            high = mid - 1
        else:
            # found equal
            return mid

    return low


def insort(items, item):
    """Insert `item` into sorted list `items` in place and return its index."""
    items.insert(index := insertion_index(items, item), item)
    return index


def sort(items):
    """
    Sort a collection of strings case-insensitively.

    Items are inserted one by one into a new list at the position found by
    binary search, which makes this quadratic in the number of items.

    Parameters
    ----------
    items : iterable of str or None
        Strings to sort, eg. a list or set. Elements may not be None.

    Examples
    --------
    >>> sort(['b', 'A', 'c'])
    ['A', 'b', 'c']

    Returns
    -------
    list of str or None
        A new sorted list, or None if `items` is None.

    Raises
    ------
    TypeError
        If any of the elements is None.
    """
    if items is None:
        return None

    result = []
    for item in items:
        insort(result, item)
    return result
