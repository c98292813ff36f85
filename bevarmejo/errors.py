"""Uniform formatting of error messages raised by classes and functions."""

from typing import NoReturn

CLASS_POSTFIX = "::"
FUNCTION_POSTFIX = "()"
WIDE_COLON = " : "


def _fmt(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_reason(reason: object, *args: object) -> str:
    """Format the reason block that follows the main message."""
    return "\tReason : " + _fmt(reason) + "\n\t" + "".join(_fmt(a) for a in args)


def format_class_error(
    class_name: str, function_name: str, message: str, *args: object
) -> str:
    """Format an error raised by a method of a class."""
    text = (
        f"{class_name}{CLASS_POSTFIX}{function_name}{FUNCTION_POSTFIX}"
        f"{WIDE_COLON}{message}\n"
    )
    if args:
        text += format_reason(*args) + "\n"
    return text


def format_function_error(function_name: str, message: str, *args: object) -> str:
    """Format an error raised by a free function."""
    text = f"{function_name}{FUNCTION_POSTFIX}{WIDE_COLON}{message}\n"
    if args:
        text += format_reason(*args) + "\n"
    return text


def raise_class_error(
    exc_type: type[Exception],
    class_name: str,
    function_name: str,
    message: str,
    *args: object,
) -> NoReturn:
    """Raise ``exc_type`` with a class-error message."""
    raise exc_type(format_class_error(class_name, function_name, message, *args))


def raise_function_error(
    exc_type: type[Exception], function_name: str, message: str, *args: object
) -> NoReturn:
    """Raise ``exc_type`` with a function-error message."""
    raise exc_type(format_function_error(function_name, message, *args))