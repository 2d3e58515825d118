# hello_api/services/greeting.py

from typing import Sequence


class InvalidInput(ValueError):
    """The name list given to greet() was empty."""


def greet(names: Sequence[str]) -> str:
    """
    把名字串成一句問候：
    ["Per"]                 -> "Hello Per"
    ["Per", "Pål"]          -> "Hello Per and Pål"
    ["Hans", "Per", "Pål"]  -> "Hello Hans, Per and Pål"

    Names are used exactly as given, no trimming or validation.
    """
    if len(names) == 0:
        raise InvalidInput("at least one name must be specified")

    if len(names) == 1:
        return f"Hello {names[0]}"

    # 最後一個名字用 "and" 接，其餘用逗號
    head = ", ".join(names[:-1])
    return f"Hello {head} and {names[-1]}"
