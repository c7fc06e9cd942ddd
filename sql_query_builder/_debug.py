"""Used for debugging"""

STATE = {"DEBUG": False}


def set_debug(flag: bool = True):
    """Turn debug output on or off"""
    STATE["DEBUG"] = bool(flag)


def is_debug() -> bool:
    """Is debug output active?"""
    return STATE["DEBUG"]


def if_debug_print(*args, sep=" ", end="\n", flush=True):
    """If debug? print!"""
    if STATE["DEBUG"]:
        arg0 = args[0]
        print(
            arg0,
            *(repr(arg) for arg in args[1:]),
            sep=sep,
            end=end,
            flush=flush,
        )
