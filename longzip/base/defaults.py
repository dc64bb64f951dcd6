"""Work out the "empty" value of an element type, for filling in missing entries."""

from array import array
from typing import Any, Callable, Optional, Sequence

DefaultFactory = Callable[[], Any]

# array typecodes whose elements aren't ints.
_ARRAY_ELEMENT_TYPES = {"f": float, "d": float, "u": str, "w": str}


def default_factory_for(element_type: type, name: Optional[str] = None) -> DefaultFactory:
    """Return a zero-argument factory which yields the default value of ``element_type``.

    The default value of a type is whatever it gives you when constructed with no arguments:
    ``0`` for int, ``0.0`` for float, ``""`` for str, ``None`` for ``type(None)``, and so on.

    We call the factory once right away, so that a type with no sensible default fails here, when
    the caller binds it, and not halfway through an iteration.

    Args:
        element_type: The type whose default we want.
        name: An optional label for the thing being bound, used to give nicer error messages.

    Raises:
        TypeError if ``element_type`` can't be constructed with no arguments, for whatever reason.
        The original error is chained as the cause.
    """
    try:
        element_type()
    except Exception as e:
        what = f'source "{name}"' if name else "a source"
        raise TypeError(
            f"Element type {element_type.__name__} of {what} has no default value; pass an "
            f"explicit default for it instead"
        ) from e
    return element_type


def constant_factory(value: Any) -> DefaultFactory:
    """Return a factory that always yields ``value``. Handy for caller-supplied sentinels."""

    def _constant() -> Any:
        return value

    return _constant


def infer_element_type(sequence: Sequence[Any]) -> type:
    """Guess the element type of a sequence.

    Strings, bytes and arrays know their element types no matter what they contain. For anything
    else we go by the type of the first element, which means that a heterogeneous list gets the
    default value of whatever happens to come first. An empty sequence tells us nothing, so we
    fall back to ``type(None)``, whose default value is simply ``None``.
    """
    if isinstance(sequence, str):
        return str
    if isinstance(sequence, (bytes, bytearray)):
        return int
    if isinstance(sequence, array):
        return _ARRAY_ELEMENT_TYPES.get(sequence.typecode, int)
    if len(sequence) == 0:
        return type(None)
    return type(sequence[0])
