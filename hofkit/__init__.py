"""Higher-order function adaptors: placeholders, always, decay, arg, flip, fold, lift, combine, decorate and unpack."""

__version__ = "0.1.0"

__all__ = [
    "placeholders",
    "always",
    "decay",
    "arg",
    "flip",
    "fold",
    "lift",
    "combine",
    "decorate",
    "unpack",
]