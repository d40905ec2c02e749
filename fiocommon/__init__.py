"""Shared helpers for FIO protocol contracts: names, base58 keys, validators, errors, time and reward routing."""

__version__ = "0.1.0"

__all__ = [
    "base58",
    "chain_control",
    "common",
    "errors",
    "fiotime",
    "keyops",
    "names",
    "validator",
]