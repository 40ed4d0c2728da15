# ==============================================
# Type Identity
# ==============================================
#
# PURPOSE:
#   Turn a consumer type into the string used as its cache key.
#
# RULES:
# ------
#   - class       → "<module>.<qualname>"  (e.g. "myapp.contexts.BlogContext")
#   - str         → used verbatim          (e.g. "MyApp.BlogContext")
#   - None / ""   → ValueError
#   - anything else → TypeError
#
# ==============================================

from typing import Union

ConsumerType = Union[type, str]


def type_key(consumer_type: ConsumerType) -> str:
    """
    Return the fully-qualified identity of a consumer type.

    Args:
        consumer_type: A class, or an already-qualified name

    Returns:
        The identity string used as the cache key
    """
    if consumer_type is None:
        raise ValueError("consumer_type must not be None")

    if isinstance(consumer_type, str):
        if not consumer_type.strip():
            raise ValueError("consumer_type must not be empty")
        return consumer_type

    if isinstance(consumer_type, type):
        return f"{consumer_type.__module__}.{consumer_type.__qualname__}"

    raise TypeError(
        f"consumer_type must be a class or a str, got {type(consumer_type).__name__}"
    )
