def ask(hint: str) -> str:
    # survey grabs the terminal on import, keep it off the clone path
    from survey import routines

    answer: str = routines.input(hint)  # type: ignore
    return answer
