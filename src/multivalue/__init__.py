"""multivalue — a dictionary that maps each key to a set of distinct values.

Basic usage::

    from multivalue import MultiValueDictionary

    owners = MultiValueDictionary[str, str]()
    owners.add_element("repo", "alice")
    owners.add_element("repo", "bob")

    owners.get_values("repo")          # ("alice", "bob")
    owners.remove_element("repo", "bob")  # ("repo", "bob")

    for key, value in owners:
        print(key, value)

Command line::

    multivalue demo
    multivalue group pairs.txt --layout grouped
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DisplayConfig",
    "MultiValueDictionary",
    "MultiValueDictionaryProtocol",
    "MultiValueError",
    "PairFormatError",
    "PairIterator",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "multivalue.errors",
    "DisplayConfig": "multivalue.config",
    "MultiValueDictionary": "multivalue.dictionary",
    "MultiValueDictionaryProtocol": "multivalue._internal.multimap",
    "MultiValueError": "multivalue.errors",
    "PairFormatError": "multivalue.errors",
    "PairIterator": "multivalue.iterator",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import multivalue`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
