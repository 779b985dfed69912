"""
Account path parsing
"""
from typing import List, Sequence, Tuple, Union

from ..config import settings
from ..exceptions import InvalidAccountPathError

ACCOUNT_SEPARATOR = ":"


def parse_account(account: Union[str, Sequence[str]]) -> Tuple[List[str], str]:
    """
    Normalize an account into ``(account_path, accounts)``.

    ``"Assets:Receivable"`` and ``["Assets", "Receivable"]`` both give
    ``(["Assets", "Receivable"], "Assets:Receivable")``.
    """
    if isinstance(account, str):
        path = account.split(ACCOUNT_SEPARATOR)
    else:
        path = list(account)

    if not path or any(not isinstance(part, str) or not part.strip() for part in path):
        raise InvalidAccountPathError(f"Invalid account path: {account!r}")

    max_depth = settings.ledger.MAX_ACCOUNT_PATH_DEPTH
    if len(path) > max_depth:
        raise InvalidAccountPathError(
            f"Account path is limited to {max_depth} levels: {account!r}"
        )

    return path, ACCOUNT_SEPARATOR.join(path)
