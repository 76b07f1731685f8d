"""
C-compatible boundary for two-touch conversion.

Inputs are null-terminated UTF-8 byte strings; outputs are ctypes buffers
owned by this module until the caller hands them back:

    result = convert_to_two_touch_string(b"...")
    for i in range(result.len):
        result.data[i]                      # bytes
    free_two_touch_string_result(result)

    ptr = convert_from_two_touch_string(b"81225223")
    ptr.value                               # bytes, or ptr is None on failure
    free_two_touch_string(ptr)

Every successful call must be paired with exactly one free call. Freeing NULL
or an empty result is a no-op; freeing anything else twice raises ValueError.
Strings inside a result's data array belong to the result and are released
with it.

Known limitation: every failure (NULL input, invalid UTF-8, an input that
cannot be converted) collapses to the same empty/NULL result. The specific
cause is only available in the debug log.
"""
from __future__ import annotations

import ctypes
import threading

from twotouch.converter import get_default_converter
from twotouch.log import logger
from twotouch.types import ParseError


class TwoTouchStringResult(ctypes.Structure):
    _fields_ = [
        ("len", ctypes.c_size_t),
        ("data", ctypes.POINTER(ctypes.c_char_p)),
    ]


# address -> objects that must stay alive until freed
_allocations: dict[int, object] = {}
_allocations_lock = threading.Lock()


def _address(ptr) -> int | None:
    return ctypes.cast(ptr, ctypes.c_void_p).value


def _read_c_string(val: bytes | bytearray | ctypes.c_char_p | None) -> str:
    """Decode a null-terminated UTF-8 input; anything after a NUL is ignored as C would."""
    if isinstance(val, ctypes.c_char_p):
        val = val.value
    if val is None:
        raise ParseError("null pointer")
    if not isinstance(val, (bytes, bytearray)):
        raise TypeError(f"expected bytes or c_char_p, got {type(val).__name__}")

    raw = bytes(val).split(b"\0", 1)[0]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError("invalid UTF-8", text=repr(raw), position=e.start) from e


def _create_buffer(value: str) -> ctypes.Array:
    encoded = value.encode("utf-8")
    if b"\0" in encoded:
        raise ParseError("output contains a null byte", text=value, position=encoded.index(b"\0"))
    return ctypes.create_string_buffer(encoded)


def _register(address: int, owned: object) -> None:
    with _allocations_lock:
        _allocations[address] = owned


def _release(address: int) -> None:
    with _allocations_lock:
        if _allocations.pop(address, None) is None:
            raise ValueError(f"pointer 0x{address:x} was not allocated here or has already been freed")


def convert_to_two_touch_string(val: bytes | bytearray | ctypes.c_char_p | None) -> TwoTouchStringResult:
    """Encode a C string; returns (count, array of C strings) or (0, NULL) on failure."""
    try:
        text = _read_c_string(val)
        buffers = [_create_buffer(code) for code in get_default_converter().encode(text)]
    except ParseError as e:
        logger.debug("convert_to_two_touch_string failed: %s", e)
        return TwoTouchStringResult(0, None)

    array = (ctypes.c_char_p * len(buffers))(*(ctypes.addressof(buffer) for buffer in buffers))
    _register(ctypes.addressof(array), (array, buffers))
    return TwoTouchStringResult(len(buffers), ctypes.cast(array, ctypes.POINTER(ctypes.c_char_p)))


def convert_from_two_touch_string(val: bytes | bytearray | ctypes.c_char_p | None) -> ctypes.c_char_p | None:
    """Decode a C string of digits; returns a C string or None (NULL) on failure."""
    try:
        text = _read_c_string(val)
        buffer = _create_buffer(get_default_converter().decode(text))
    except ParseError as e:
        logger.debug("convert_from_two_touch_string failed: %s", e)
        return None

    _register(ctypes.addressof(buffer), buffer)
    return ctypes.c_char_p(ctypes.addressof(buffer))


def free_two_touch_string_result(result: TwoTouchStringResult) -> None:
    """Release a result from convert_to_two_touch_string, including all of its strings."""
    address = _address(result.data)
    if address is None:
        return
    _release(address)


def free_two_touch_string(ptr: ctypes.c_char_p | None) -> None:
    """Release a string from convert_from_two_touch_string."""
    if ptr is None:
        return
    address = _address(ptr)
    if address is None:
        return
    _release(address)


def outstanding_allocations() -> int:
    """Number of results and strings handed out and not yet freed."""
    with _allocations_lock:
        return len(_allocations)
